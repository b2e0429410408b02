from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Iterable

from rssconv.errors import LoadError, PipelineStateError, RssconvError, WriteError
from rssconv.loaders import HttpLoader, Loader
from rssconv.printers import Printer, printer_for_target
from rssconv.processing import Converter, ReplaceConverter
from rssconv.types import OutputTarget, ReplacementRule

logger = logging.getLogger(__name__)


class PipelineStage(enum.Enum):
    CREATED = "created"
    LOADED = "loaded"
    CONVERTED = "converted"
    PRINTED = "printed"


_PREVIOUS_STAGE = {
    PipelineStage.LOADED: PipelineStage.CREATED,
    PipelineStage.CONVERTED: PipelineStage.LOADED,
    PipelineStage.PRINTED: PipelineStage.CONVERTED,
}


@dataclass
class PipelineStats:
    """Counters and recorded failures returned to the CLI and tests."""

    stage: PipelineStage = PipelineStage.CREATED
    sources: int | None = None
    documents_loaded: int = 0
    documents_printed: int = 0
    errors: list[RssconvError] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        # Only the last failure decides the status.
        if not self.errors:
            return 0
        return self.errors[-1].exit_code


class ConversionPipeline:
    """
    Load -> Convert -> Print coordinator.

    The pipeline owns the document collection and replaces it wholesale at each
    stage. Stages run once each, in order.

    With ``continue_on_error`` (the default) a failed load is logged and the
    remaining stages still run on whatever was fetched before the failure,
    possibly nothing. Disable it to stop the run at the first failure instead.
    """

    def __init__(
        self,
        loader: Loader,
        converter: Converter,
        printer: Printer,
        *,
        continue_on_error: bool = True,
    ) -> None:
        self.loader = loader
        self.converter = converter
        self.printer = printer
        self.continue_on_error = continue_on_error
        self.documents: list[str] = []
        self.stats = PipelineStats(sources=_count_sources(loader))

    @classmethod
    def from_options(
        cls,
        urls: Iterable[str],
        rule: ReplacementRule,
        target: OutputTarget,
        *,
        continue_on_error: bool = True,
        timeout: float | None = None,
        user_agent: str = "rssconv/0.1",
        follow_redirects: bool = True,
    ) -> "ConversionPipeline":
        loader = HttpLoader(
            urls,
            timeout=timeout,
            user_agent=user_agent,
            follow_redirects=follow_redirects,
        )
        return cls(
            loader,
            ReplaceConverter(rule),
            printer_for_target(target),
            continue_on_error=continue_on_error,
        )

    def close(self) -> None:
        close = getattr(self.loader, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "ConversionPipeline":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    @property
    def stage(self) -> PipelineStage:
        return self.stats.stage

    def load_documents(self) -> None:
        self._enter(PipelineStage.LOADED)
        try:
            self.documents = self.loader.load()
        except LoadError as exc:
            self.documents = list(exc.documents)
            self.stats.errors.append(exc)
            logger.error(
                "Failed to load RSS",
                extra={"url": exc.url, "fetched": len(exc.documents), "error": exc.message},
            )
            if not self.continue_on_error:
                raise
        finally:
            self.stats.documents_loaded = len(self.documents)

    def convert_documents(self) -> None:
        self._enter(PipelineStage.CONVERTED)
        self.documents = self.converter.convert(self.documents)

    def print_documents(self) -> None:
        self._enter(PipelineStage.PRINTED)
        try:
            self.printer.print_documents(self.documents)
        except WriteError as exc:
            self.stats.errors.append(exc)
            logger.error("Failed to print RSS", extra={"path": str(exc.path), "error": exc.message})
            if not self.continue_on_error:
                raise
        else:
            self.stats.documents_printed = len(self.documents)

    def run(self) -> PipelineStats:
        """Run every stage in order; failures are reported through the stats."""

        try:
            self.load_documents()
            self.convert_documents()
            self.print_documents()
        except (LoadError, WriteError):
            # Strict mode: already recorded, the run stops here.
            pass
        finally:
            logger.info(
                "Conversion finished",
                extra={
                    "stage": self.stage.value,
                    "sources": self.stats.sources,
                    "documents_loaded": self.stats.documents_loaded,
                    "documents_printed": self.stats.documents_printed,
                    "errors": len(self.stats.errors),
                },
            )
        return self.stats

    def _enter(self, stage: PipelineStage) -> None:
        expected = _PREVIOUS_STAGE[stage]
        if self.stats.stage is not expected:
            raise PipelineStateError(
                f"Cannot move to {stage.value!r} from {self.stats.stage.value!r}",
                {"expected": expected.value},
            )
        logger.debug("Pipeline stage %s -> %s", self.stats.stage.value, stage.value)
        self.stats.stage = stage


def _count_sources(loader: Loader) -> int | None:
    urls = getattr(loader, "urls", None)
    return len(urls) if urls is not None else None
