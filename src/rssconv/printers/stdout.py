from __future__ import annotations

import logging
import sys
from typing import Sequence, TextIO

from rssconv.printers.base import Printer
from rssconv.text import encode_document

logger = logging.getLogger(__name__)


class StdoutPrinter(Printer):
    """
    Writes each document on its own line to standard output.

    Write failures (a closed pipe, a full disk) are logged and end the print
    stage quietly; they never reach the caller.
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def print_documents(self, documents: Sequence[str]) -> None:
        # Resolved per call so redirected/captured stdout is honored.
        stream = self._stream or sys.stdout
        buffer = getattr(stream, "buffer", None)
        try:
            for document in documents:
                if buffer is not None:
                    stream.flush()
                    buffer.write(encode_document(document) + b"\n")
                    buffer.flush()
                else:
                    print(document, file=stream)
        except OSError as exc:
            logger.warning("Failed to write to standard output", extra={"error": str(exc)})
