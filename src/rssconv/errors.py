"""
Exceptions raised by the rssconv pipeline.

Every error that can end a run carries the process exit code the CLI reports
for it, so the final status is decided once at the top level.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence


class RssconvError(Exception):
    """Base exception for all rssconv errors."""

    exit_code: int = 1

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(RssconvError):
    """Invalid or missing command-line configuration."""

    exit_code = 1


class PipelineStateError(RssconvError):
    """A pipeline stage was invoked out of order."""


# =============================================================================
# Load stage
# =============================================================================


class LoadError(RssconvError):
    """
    Base exception for loader failures.

    ``documents`` holds whatever was fetched before the failing URL, in source
    order, so callers can decide whether to keep going with a partial set.
    """

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        documents: Sequence[str] = (),
        details: dict[str, Any] | None = None,
    ) -> None:
        merged = {"url": url} if url else {}
        merged.update(details or {})
        super().__init__(message, merged)
        self.url = url
        self.documents = list(documents)


class FetchError(LoadError):
    """The HTTP request could not be completed."""

    exit_code = 1


class ReadError(LoadError):
    """The response body could not be read."""

    exit_code = 2


# =============================================================================
# Print stage
# =============================================================================


class WriteError(RssconvError):
    """The output file could not be created or written."""

    exit_code = 3

    def __init__(self, message: str, *, path: Path | str, details: dict[str, Any] | None = None) -> None:
        merged = {"path": str(path)}
        merged.update(details or {})
        super().__init__(message, merged)
        self.path = Path(path)
