"""Browser driven pagination of the composed page into an A4 PDF."""

from __future__ import annotations

from contextlib import suppress
from html import escape
from pathlib import Path
from typing import Any

from .browser import BrowserLauncher
from .errors import RenderError
from .models import ComposedDocument, RenderOptions
from .utils import atomic_write_bytes, run_sync

PAPER_FORMAT = "A4"
PAGE_MARGIN: dict[str, str] = {
    "top": "2cm",
    "right": "2.5cm",
    "bottom": "2cm",
    "left": "2.5cm",
}

EMPTY_HEADER = "<div></div>"
HEADER_STYLE = "font-size: 9px; font-family: '宋体'; color: #333; padding: 5px; margin-left: 0.6cm;"
FOOTER_STYLE = "font-size: 9px; font-family: '宋体'; color: #333; padding: 5px; margin: 0 auto;"


def header_template(title: str | None) -> str:
    # Chromium fills span.title with the document title when printing.
    if title is None:
        return EMPTY_HEADER
    return f'<div style="{HEADER_STYLE}"> <span class="title">{escape(title)}</span> </div>'


def footer_template() -> str:
    return (
        f'<div style="{FOOTER_STYLE}">'
        '第 <span class="pageNumber"></span> 页 / 共 <span class="totalPages"></span> 页'
        "</div>"
    )


def build_pdf_options(options: RenderOptions, document: ComposedDocument) -> dict[str, Any]:
    return {
        "format": PAPER_FORMAT,
        "margin": dict(PAGE_MARGIN),
        "display_header_footer": True,
        "header_template": header_template(document.title if options.show_title else None),
        "footer_template": footer_template(),
    }


class PdfEmitter:
    def __init__(self, launcher: BrowserLauncher) -> None:
        self._launcher = launcher

    async def emit(self, options: RenderOptions, document: ComposedDocument) -> Path:
        try:
            browser = await self._launcher.launch(options.browser)
        except Exception as exc:
            raise RenderError(
                "BROWSER_LAUNCH_FAILED", f"Cannot launch browser {options.browser}: {exc}"
            ) from exc

        try:
            page = await browser.new_page()
            await page.set_content(document.html)
            payload = await page.pdf(**build_pdf_options(options, document))
        except BaseException as exc:
            with suppress(Exception):
                await browser.close()
            if isinstance(exc, Exception):
                raise RenderError("PRINT_FAILED", f"Cannot print {options.src.name}: {exc}") from exc
            raise
        await browser.close()

        try:
            await run_sync(atomic_write_bytes, options.out, payload)
        except OSError as exc:
            raise RenderError("PDF_WRITE_FAILED", f"Cannot write {options.out}: {exc}") from exc
        return options.out


__all__ = [
    "PAGE_MARGIN",
    "PAPER_FORMAT",
    "PdfEmitter",
    "build_pdf_options",
    "footer_template",
    "header_template",
]
