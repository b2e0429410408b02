from __future__ import annotations

from typing import Protocol


class Loader(Protocol):
    """Interface for fetching raw text documents from a fixed list of sources."""

    def load(self) -> list[str]:
        """
        Return one document per source, in source order.

        Raises ``LoadError`` on the first failing source; the error carries the
        documents loaded before it.
        """
