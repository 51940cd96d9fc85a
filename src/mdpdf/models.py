"""Domain models for the Markdown to PDF pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Resolved parameters of a single invocation."""

    src: Path
    out: Path
    output_html: bool = False
    show_title: bool = False
    browser: str = ""


@dataclass(frozen=True, slots=True)
class ComposedDocument:
    """Self-contained HTML page handed to the browser."""

    title: str
    html: str


class PipelineState(str, Enum):
    IDLE = "idle"
    RENDERING = "rendering"
    DONE = "done"
    FAILED = "failed"


class OutcomeStatus(str, Enum):
    SUCCEEDED = "succeeded"
    PARAMETER_ERROR = "parameter_error"
    FATAL_ERROR = "fatal_error"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES: dict[OutcomeStatus, int] = {
    OutcomeStatus.SUCCEEDED: 0,
    OutcomeStatus.PARAMETER_ERROR: 2,
    OutcomeStatus.FATAL_ERROR: 1,
}


@dataclass(frozen=True, slots=True)
class RenderOutcome:
    """Result of a pipeline run, one of success, parameter error or fatal error."""

    status: OutcomeStatus
    options: RenderOptions | None = None
    html_path: Path | None = None
    error_name: str | None = None
    error_code: str | None = None
    message: str | None = None
    log_error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is OutcomeStatus.SUCCEEDED


__all__ = [
    "ComposedDocument",
    "OutcomeStatus",
    "PipelineState",
    "RenderOptions",
    "RenderOutcome",
]
