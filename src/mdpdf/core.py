from __future__ import annotations

import os
import time
from dataclasses import replace
from collections.abc import Callable, Sequence
from pathlib import Path

from .browser import BrowserLauncher
from .composer import compose_document, save_document
from .emitter import PdfEmitter
from .errors import ParameterError, RenderError
from .logging import RunLogEntry, RunLogger, StageTimings
from .models import OutcomeStatus, PipelineState, RenderOptions, RenderOutcome
from .params import resolve_options
from .renderer import MarkdownRenderer
from .utils import run_sync

StylesheetLoader = Callable[[], str]
TransitionCallback = Callable[[PipelineState], None]


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def _error_name(exc: BaseException) -> str:
    if isinstance(exc, RenderError) and exc.__cause__ is not None:
        return type(exc.__cause__).__name__
    return type(exc).__name__


class RenderPipeline:
    """Runs one Markdown document through resolve, render, compose and print.

    Every failure ends the run: parameter problems are reported before any
    file is read, everything else is a fatal error. Files already written
    (the intermediate HTML) are left in place.
    """

    def __init__(
        self,
        *,
        launcher: BrowserLauncher,
        load_stylesheet: StylesheetLoader,
        renderer: MarkdownRenderer | None = None,
        default_browser: str | None = None,
        run_logger: RunLogger | None = None,
        on_transition: TransitionCallback | None = None,
    ) -> None:
        self._emitter = PdfEmitter(launcher)
        self._load_stylesheet = load_stylesheet
        self._renderer = renderer or MarkdownRenderer()
        self._default_browser = default_browser
        self._run_logger = run_logger
        self._on_transition = on_transition or (lambda _: None)
        self._state = PipelineState.IDLE

    @property
    def state(self) -> PipelineState:
        return self._state

    async def run(self, args: Sequence[str], cwd: str | os.PathLike[str]) -> RenderOutcome:
        self._state = PipelineState.IDLE
        timings = StageTimings()
        try:
            options = resolve_options(args, cwd, default_browser=self._default_browser)
        except ParameterError as exc:
            outcome = RenderOutcome(
                status=OutcomeStatus.PARAMETER_ERROR,
                error_name=type(exc).__name__,
                error_code=exc.code,
                message=str(exc),
            )
            return self._finish(PipelineState.FAILED, outcome, timings)

        self._transition(PipelineState.RENDERING)
        try:
            html_path = await self._render(options, timings)
        except Exception as exc:
            outcome = RenderOutcome(
                status=OutcomeStatus.FATAL_ERROR,
                options=options,
                error_name=_error_name(exc),
                error_code=getattr(exc, "code", None),
                message=str(exc),
            )
            return self._finish(PipelineState.FAILED, outcome, timings)

        outcome = RenderOutcome(
            status=OutcomeStatus.SUCCEEDED,
            options=options,
            html_path=html_path,
        )
        return self._finish(PipelineState.DONE, outcome, timings)

    async def _render(self, options: RenderOptions, timings: StageTimings) -> Path | None:
        read_start = time.perf_counter()
        source = await self._read_source(options.src)
        timings.read_ms = _elapsed_ms(read_start)

        render_start = time.perf_counter()
        fragment = self._renderer.render(source)
        timings.render_ms = _elapsed_ms(render_start)

        compose_start = time.perf_counter()
        stylesheet = await self._read_stylesheet()
        document = compose_document(options, fragment, stylesheet)
        html_path = await save_document(options, document)
        timings.compose_ms = _elapsed_ms(compose_start)

        print_start = time.perf_counter()
        await self._emitter.emit(options, document)
        timings.print_ms = _elapsed_ms(print_start)
        return html_path

    async def _read_source(self, path: Path) -> str:
        try:
            return await run_sync(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise RenderError("SOURCE_UNREADABLE", f"Cannot read {path}: {exc}") from exc

    async def _read_stylesheet(self) -> str:
        try:
            return await run_sync(self._load_stylesheet)
        except (OSError, UnicodeDecodeError) as exc:
            raise RenderError("STYLESHEET_UNREADABLE", f"Cannot read stylesheet: {exc}") from exc

    def _transition(self, state: PipelineState) -> None:
        self._state = state
        self._on_transition(state)

    def _finish(
        self, state: PipelineState, outcome: RenderOutcome, timings: StageTimings
    ) -> RenderOutcome:
        self._transition(state)
        if self._run_logger is None:
            return outcome
        try:
            self._run_logger.append(self._log_entry(outcome, timings))
        except OSError as exc:
            return replace(outcome, log_error=f"Cannot write run log: {exc}")
        return outcome

    def _log_entry(self, outcome: RenderOutcome, timings: StageTimings) -> RunLogEntry:
        options = outcome.options
        return RunLogEntry(
            source=str(options.src) if options else None,
            output_path=str(options.out) if options else None,
            html_path=str(outcome.html_path) if outcome.html_path else None,
            status=outcome.status.value,
            error_code=outcome.error_code,
            message=outcome.message,
            timings=timings,
        )


__all__ = [
    "RenderPipeline",
    "StylesheetLoader",
    "TransitionCallback",
]
