from rssconv.types import OutputTarget

from .base import Printer
from .file import FilePrinter
from .stdout import StdoutPrinter


def printer_for_target(target: OutputTarget) -> Printer:
    """Pick the sink: standard output unless a file path was given."""

    if target.is_stdout:
        return StdoutPrinter()
    return FilePrinter(target.path)


__all__ = [
    "FilePrinter",
    "Printer",
    "StdoutPrinter",
    "printer_for_target",
]
