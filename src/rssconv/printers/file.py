from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from rssconv.errors import WriteError
from rssconv.printers.base import Printer
from rssconv.text import ENCODING, ERRORS

logger = logging.getLogger(__name__)


class FilePrinter(Printer):
    """
    Writes the raw concatenation of all documents to a single file.

    The file is truncated on every run. No delimiter is inserted between
    documents and newlines are written untranslated. Documents are encoded
    back to the exact bytes they were fetched as.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def print_documents(self, documents: Sequence[str]) -> None:
        try:
            fh = self.path.open("w", encoding=ENCODING, errors=ERRORS, newline="")
        except OSError as exc:
            raise WriteError(f"Failed to open output file: {exc}", path=self.path) from exc

        with fh:
            for document in documents:
                try:
                    fh.write(document)
                    fh.flush()
                except OSError as exc:
                    raise WriteError(f"Failed to write output file: {exc}", path=self.path) from exc
        logger.debug("Wrote %s documents to %s", len(documents), self.path)
