from __future__ import annotations

from typing import Protocol, Sequence


class Printer(Protocol):
    """Interface for emitting the final documents to a sink."""

    def print_documents(self, documents: Sequence[str]) -> None:
        """Write every document to the sink, in order."""
