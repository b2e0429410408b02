from .converter import Converter, ReplaceConverter, replace_literal

__all__ = [
    "Converter",
    "ReplaceConverter",
    "replace_literal",
]
