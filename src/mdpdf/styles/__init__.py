"""Bundled journal stylesheet."""

from __future__ import annotations

from importlib import resources

DEFAULT_STYLESHEET = "APS.css"


def load_stylesheet(name: str = DEFAULT_STYLESHEET) -> str:
    return resources.files(__name__).joinpath(name).read_text(encoding="utf-8")


__all__ = ["DEFAULT_STYLESHEET", "load_stylesheet"]
