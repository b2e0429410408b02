import io

import pytest

from rssconv.errors import WriteError
from rssconv.loaders import StaticLoader
from rssconv.pipeline import ConversionPipeline, PipelineStage
from rssconv.printers import FilePrinter, StdoutPrinter, printer_for_target
from rssconv.processing import ReplaceConverter
from rssconv.types import OutputTarget


def test_stdout_printer_writes_one_document_per_line(capsys):
    StdoutPrinter().print_documents(["hello earth", "earth peace"])

    assert capsys.readouterr().out == "hello earth\nearth peace\n"


def test_stdout_printer_accepts_explicit_stream():
    stream = io.StringIO()
    StdoutPrinter(stream).print_documents(["a", "b\n"])

    assert stream.getvalue() == "a\nb\n\n"


def test_file_printer_concatenates_without_delimiter(tmp_path):
    out = tmp_path / "out.xml"
    FilePrinter(out).print_documents(["<rss>a</rss>\r\n", "<rss>b</rss>"])

    assert out.read_bytes() == b"<rss>a</rss>\r\n<rss>b</rss>"


def test_file_printer_truncates_existing_file(tmp_path):
    out = tmp_path / "out.xml"
    out.write_text("stale content from a previous run", encoding="utf-8")

    FilePrinter(out).print_documents(["new"])

    assert out.read_text(encoding="utf-8") == "new"


def test_file_printer_with_no_documents_leaves_empty_file(tmp_path):
    out = tmp_path / "out.xml"
    FilePrinter(out).print_documents([])

    assert out.exists()
    assert out.read_text(encoding="utf-8") == ""


def test_file_printer_reports_creation_failure(tmp_path):
    out = tmp_path / "missing-dir" / "out.xml"

    with pytest.raises(WriteError) as excinfo:
        FilePrinter(out).print_documents(["a"])

    assert excinfo.value.exit_code == 3
    assert excinfo.value.path == out
    assert not out.exists()


def test_printer_for_target_selects_sink(tmp_path):
    assert isinstance(printer_for_target(OutputTarget()), StdoutPrinter)

    printer = printer_for_target(OutputTarget(tmp_path / "out.xml"))
    assert isinstance(printer, FilePrinter)
    assert printer.path == tmp_path / "out.xml"


class BrokenPipeStream(io.StringIO):
    def write(self, _text):
        raise BrokenPipeError(32, "Broken pipe")


def test_stdout_printer_swallows_write_errors():
    StdoutPrinter(BrokenPipeStream()).print_documents(["a", "b"])


def test_stdout_write_errors_do_not_escape_the_pipeline():
    pipeline = ConversionPipeline(
        StaticLoader(["a"]),
        ReplaceConverter.from_words(),
        StdoutPrinter(BrokenPipeStream()),
    )

    stats = pipeline.run()

    assert stats.stage is PipelineStage.PRINTED
    assert stats.exit_code == 0


def test_stdout_printer_writes_original_bytes(capsysbinary):
    document = b"<t>caf\xe9</t>".decode("utf-8", errors="surrogateescape")

    StdoutPrinter().print_documents([document])

    assert capsysbinary.readouterr().out == b"<t>caf\xe9</t>\n"
