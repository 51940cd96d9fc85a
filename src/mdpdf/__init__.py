"""Markdown manuscript to journal formatted PDF renderer."""

from .config import AppConfig, load_config
from .core import RenderPipeline
from .errors import ParameterError, RenderError
from .models import ComposedDocument, OutcomeStatus, RenderOptions, RenderOutcome
from .params import resolve_options

__all__ = [
    "AppConfig",
    "load_config",
    "ComposedDocument",
    "OutcomeStatus",
    "ParameterError",
    "RenderError",
    "RenderOptions",
    "RenderOutcome",
    "RenderPipeline",
    "resolve_options",
]
