from __future__ import annotations

from typing import Iterable

from rssconv.errors import LoadError
from rssconv.loaders.base import Loader


class StaticLoader(Loader):
    """Loader backed by in-memory documents, for offline runs and tests."""

    def __init__(self, documents: Iterable[str], *, error: LoadError | None = None):
        self._documents = list(documents)
        self._error = error

    def load(self) -> list[str]:
        if self._error is not None:
            raise self._error
        return list(self._documents)
