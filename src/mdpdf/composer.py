"""Assembly of the printable HTML page."""

from __future__ import annotations

from html import escape
from pathlib import Path

from .constraint import HTML_EXTENSION, MARKDOWN_EXTENSION
from .errors import RenderError
from .models import ComposedDocument, RenderOptions
from .utils import atomic_write, run_sync, swap_suffix


def derive_title(src: Path) -> str:
    name = src.name
    if name.endswith(MARKDOWN_EXTENSION):
        name = name[: -len(MARKDOWN_EXTENSION)]
    return name


def intermediate_path(options: RenderOptions) -> Path:
    return swap_suffix(options.src, MARKDOWN_EXTENSION, HTML_EXTENSION)


def compose_document(options: RenderOptions, fragment: str, stylesheet: str) -> ComposedDocument:
    """Embed ``stylesheet`` and ``fragment`` verbatim into the page skeleton."""

    title = derive_title(options.src)
    html = (
        "<!DOCTYPE html>\n"
        '<html lang="zh-CN">\n'
        "<head>\n"
        '  <meta charset="UTF-8">\n'
        f"  <title>{escape(title)}</title>\n"
        f"  <style>{stylesheet}</style>\n"
        "</head>\n"
        "<body>\n"
        f"{fragment}\n"
        "</body>\n"
        "</html>\n"
    )
    return ComposedDocument(title=title, html=html)


async def save_document(options: RenderOptions, document: ComposedDocument) -> Path | None:
    """Write the page beside the source when ``--outputHTML`` was given."""

    if not options.output_html:
        return None
    path = intermediate_path(options)
    try:
        await run_sync(atomic_write, path, document.html)
    except OSError as exc:
        raise RenderError("HTML_WRITE_FAILED", f"Cannot write {path}: {exc}") from exc
    return path


__all__ = ["compose_document", "derive_title", "intermediate_path", "save_document"]
