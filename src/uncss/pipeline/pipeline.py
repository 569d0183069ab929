"""Pipeline: acquires documents, finds and parses stylesheets, filters, serializes."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from enum import Enum

from uncss.config import UncssOptions
from uncss.css import minify_css, parse_css, serialize_stylesheet
from uncss.dom import Document, parse_document
from uncss.errors import ArgumentError
from uncss.events import types as events
from uncss.events.bus import EventBus
from uncss.filter import filter_stylesheet
from uncss.render import Renderer, create_renderer
from uncss.resolver import read_stylesheets, resolve_stylesheets

logger = logging.getLogger(__name__)


class Stage(Enum):
    """Pipeline stages, in execution order."""

    ACQUIRE_DOCUMENTS = "acquire_documents"
    RESOLVE_STYLESHEETS = "resolve_stylesheets"
    READ_AND_PARSE_CSS = "read_and_parse_css"
    FILTER = "filter"
    SERIALIZE = "serialize"
    MINIFY = "minify"
    DONE = "done"


@dataclass(frozen=True)
class PipelineResult:
    """Output CSS plus a report of what the run did."""

    css: str
    stylesheets: tuple[str, ...] = ()
    skipped: tuple[str, ...] = ()
    selectors_before: int = 0
    selectors_after: int = 0
    rules_before: int = 0
    rules_after: int = 0

    @property
    def selectors_removed(self) -> int:
        return self.selectors_before - self.selectors_after

    @property
    def rules_removed(self) -> int:
        return self.rules_before - self.rules_after


class Pipeline:
    """Runs one uncss invocation through its stages.

    ``inputs`` is either literal HTML (a ``str``) or a sequence of file
    paths to render.  Stages run strictly in order; the first error aborts
    the run and no partial output is returned.
    """

    def __init__(
        self,
        options: UncssOptions | None = None,
        *,
        renderer: Renderer | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.options = options or UncssOptions()
        self.renderer = renderer or create_renderer(self.options.renderer)
        self.event_bus = event_bus or EventBus()
        self.stage: Stage | None = None

    def run(self, inputs: str | Sequence[str]) -> str:
        """Return the used CSS for *inputs*."""
        return self.run_with_report(inputs).css

    def run_with_report(self, inputs: str | Sequence[str]) -> PipelineResult:
        """Like ``run`` but returns the full PipelineResult."""
        inline = isinstance(inputs, str)
        sources = _check_inputs(inputs)
        self.event_bus.emit(events.PipelineStarted(sources=len(sources), inline=inline))

        try:
            result = self._execute(inputs if inline else sources)
        except Exception as exc:
            stage = self.stage.value if self.stage else ""
            logger.info("Pipeline failed during %s: %s", stage, exc)
            self.event_bus.emit(events.PipelineFailed(stage=stage, error=str(exc)))
            raise

        self.event_bus.emit(
            events.PipelineCompleted(
                selectors_removed=result.selectors_removed,
                output_chars=len(result.css),
            )
        )
        return result

    # --- Stages ---

    def _execute(self, inputs: str | list[str]) -> PipelineResult:
        self._enter(Stage.ACQUIRE_DOCUMENTS)
        documents, source_paths = self._acquire_documents(inputs)
        self._complete(Stage.ACQUIRE_DOCUMENTS)

        self._enter(Stage.RESOLVE_STYLESHEETS)
        paths = resolve_stylesheets(documents, source_paths, self.options.stylesheets)
        self._complete(Stage.RESOLVE_STYLESHEETS)
        if not paths and self.options.stylesheets is None:
            origin = documents[0].origin if documents else ""
            logger.info("No stylesheet linked from %s, nothing to do", origin or "input")
            self.event_bus.emit(events.NoStylesheetsFound(origin=origin))
            self.stage = Stage.DONE
            return PipelineResult(css="")

        self._enter(Stage.READ_AND_PARSE_CSS)
        loaded = read_stylesheets(
            paths, max_workers=self.options.max_workers, event_bus=self.event_bus
        )
        stylesheet = parse_css(loaded.joined())
        self._complete(Stage.READ_AND_PARSE_CSS)

        self._enter(Stage.FILTER)
        filtered = filter_stylesheet(documents, stylesheet, self.options.ignore)
        self._complete(Stage.FILTER)

        self._enter(Stage.SERIALIZE)
        css = serialize_stylesheet(filtered)
        self._complete(Stage.SERIALIZE)

        if self.options.compress:
            self._enter(Stage.MINIFY)
            css = minify_css(css)
            self._complete(Stage.MINIFY)

        self.stage = Stage.DONE
        return PipelineResult(
            css=css,
            stylesheets=loaded.paths,
            skipped=loaded.skipped,
            selectors_before=stylesheet.selector_count(),
            selectors_after=filtered.selector_count(),
            rules_before=stylesheet.rule_count(),
            rules_after=filtered.rule_count(),
        )

    def _acquire_documents(
        self, inputs: str | list[str]
    ) -> tuple[list[Document], list[str | None]]:
        if isinstance(inputs, str):
            return [parse_document(inputs)], [None]
        markups = self._render_all(inputs)
        documents: list[Document] = [
            parse_document(markup, origin=path) for markup, path in zip(markups, inputs)
        ]
        return documents, list(inputs)

    def _render_all(self, paths: list[str]) -> list[str]:
        """Render *paths* concurrently; results come back in input order.

        On the first failure pending renders are cancelled, live ones are
        terminated, and the failure propagates.
        """
        if not paths:
            return []
        pool = ThreadPoolExecutor(max_workers=min(self.options.max_workers, len(paths)))
        futures = [pool.submit(self._render_one, path) for path in paths]
        try:
            for future in as_completed(futures):
                future.result()
        except BaseException:
            for future in futures:
                future.cancel()
            self.renderer.terminate()
            raise
        finally:
            pool.shutdown(wait=True)
        return [future.result() for future in futures]

    def _render_one(self, path: str) -> str:
        self.event_bus.emit(events.RenderStarted(source=path))
        markup = self.renderer.render(path, self.options.timeout_ms)
        self.event_bus.emit(events.RenderCompleted(source=path, chars=len(markup)))
        return markup

    # --- Helpers ---

    def _enter(self, stage: Stage) -> None:
        self.stage = stage
        logger.info("Stage %s started", stage.value)
        self.event_bus.emit(events.StageStarted(stage=stage.value))

    def _complete(self, stage: Stage) -> None:
        logger.debug("Stage %s completed", stage.value)
        self.event_bus.emit(events.StageCompleted(stage=stage.value))


def _check_inputs(inputs: object) -> list[str]:
    """Validate *inputs*; return the list of sources (the markup itself for a str)."""
    if isinstance(inputs, str):
        return [inputs]
    if isinstance(inputs, (bytes, bytearray)) or not isinstance(inputs, Sequence):
        raise ArgumentError(
            f"inputs must be an HTML string or a sequence of file paths, got {type(inputs).__name__}"
        )
    sources = list(inputs)
    for source in sources:
        if not isinstance(source, str):
            raise ArgumentError(f"file paths must be strings, got {source!r}")
    return sources
