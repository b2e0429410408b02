from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from rssconv import __version__
from rssconv.config import Settings
from rssconv.errors import ConfigurationError
from rssconv.pipeline import ConversionPipeline
from rssconv.types import OutputTarget, ReplacementRule

logger = logging.getLogger(__name__)

app = typer.Typer(help="Fetch RSS documents over HTTP, replace a literal word, and print them.")


def configure_logging(verbose: bool, settings: Settings) -> None:
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}" for item in exc.errors()
        )
        error = ConfigurationError(f"Invalid configuration: {problems}")
        typer.echo(error.message, err=True)
        raise typer.Exit(code=error.exit_code) from exc


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"rssconv {__version__}")
        raise typer.Exit()


@app.command()
def convert(
    urls: Optional[List[str]] = typer.Option(
        None,
        "--url",
        "-url",
        help="URL to input RSS. Repeat for multiple sources.",
    ),
    search_word: str = typer.Option(
        "",
        "--convert-search-word",
        "-convert-search-word",
        help="Word to be replaced",
    ),
    replace_word: str = typer.Option(
        "",
        "--convert-replace-word",
        "-convert-replace-word",
        help="Word to replace with",
    ),
    out_file: Optional[str] = typer.Option(
        None,
        "--out-file",
        "-out-file",
        envvar="RSSCONV_OUT_FILE",
        help="Output file path. Standard output is used when omitted.",
    ),
    continue_on_error: Optional[bool] = typer.Option(
        None,
        "--continue-on-error/--strict",
        help="Keep converting and printing what was fetched when a URL fails",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the installed version and exit",
    ),
) -> None:
    settings = load_settings()
    configure_logging(verbose, settings)

    if not urls:
        error = ConfigurationError("Need to specify 1 -url option at least.")
        typer.echo(error.message, err=True)
        raise typer.Exit(code=error.exit_code)

    target = OutputTarget(Path(out_file) if out_file else None)
    rule = ReplacementRule(search=search_word, replace=replace_word)
    effective_continue_on_error = (
        continue_on_error if continue_on_error is not None else settings.continue_on_error
    )
    logger.debug(
        "Parsed options",
        extra={
            "urls": list(urls),
            "search_word": rule.search,
            "replace_word": rule.replace,
            "out_file": str(target.path) if target.path else None,
            "continue_on_error": effective_continue_on_error,
        },
    )

    with ConversionPipeline.from_options(
        urls,
        rule,
        target,
        continue_on_error=effective_continue_on_error,
        timeout=settings.http_timeout,
        user_agent=settings.user_agent,
        follow_redirects=settings.follow_redirects,
    ) as pipeline:
        stats = pipeline.run()

    for error in stats.errors:
        typer.echo(f"Error: {error}", err=True)
    if stats.exit_code:
        raise typer.Exit(code=stats.exit_code)


if __name__ == "__main__":
    app()
