from .base import Loader
from .http import HttpLoader
from .static import StaticLoader

__all__ = [
    "HttpLoader",
    "Loader",
    "StaticLoader",
]
