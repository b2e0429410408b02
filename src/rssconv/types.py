from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ReplacementRule:
    search: str = ""
    replace: str = ""


@dataclass(frozen=True, slots=True)
class OutputTarget:
    """Where converted documents go. ``path=None`` means standard output."""

    path: Path | None = None

    @property
    def is_stdout(self) -> bool:
        return self.path is None
