from __future__ import annotations

from collections.abc import Iterable

import markdown

from .config import DEFAULT_MARKDOWN_EXTENSIONS


class MarkdownRenderer:
    """Thin wrapper over Python-Markdown, invoked once per document."""

    def __init__(self, extensions: Iterable[str] = DEFAULT_MARKDOWN_EXTENSIONS) -> None:
        self._extensions = list(extensions)

    @property
    def extensions(self) -> tuple[str, ...]:
        return tuple(self._extensions)

    def render(self, text: str) -> str:
        return markdown.markdown(text, extensions=self._extensions, output_format="html")


__all__ = ["MarkdownRenderer"]
