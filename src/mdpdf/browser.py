"""Headless browser capability used for printing.

The emitter depends only on the three protocols below. ``PlaywrightLauncher``
is the production implementation; any other automation library with the same
shape can be swapped in.
"""

from __future__ import annotations

from typing import Any, Protocol


class PageHandle(Protocol):
    async def set_content(self, html: str) -> None:  # pragma: no cover - interface
        ...

    async def pdf(self, **options: Any) -> bytes:  # pragma: no cover - interface
        ...


class BrowserHandle(Protocol):
    async def new_page(self) -> PageHandle:  # pragma: no cover - interface
        ...

    async def close(self) -> None:  # pragma: no cover - interface
        ...


class BrowserLauncher(Protocol):
    async def launch(self, executable_path: str) -> BrowserHandle:  # pragma: no cover - interface
        ...


class PlaywrightBrowser:
    """Chromium instance together with the Playwright driver that owns it."""

    def __init__(self, playwright: Any, browser: Any) -> None:
        self._playwright = playwright
        self._browser = browser

    async def new_page(self) -> PageHandle:
        return await self._browser.new_page()

    async def close(self) -> None:
        try:
            await self._browser.close()
        finally:
            await self._playwright.stop()


class PlaywrightLauncher:
    def __init__(self, *, headless: bool = True) -> None:
        self._headless = headless

    async def launch(self, executable_path: str) -> BrowserHandle:
        try:
            from playwright.async_api import async_playwright
        except ModuleNotFoundError as exc:  # pragma: no cover - import guard
            raise RuntimeError(
                "playwright dependency is required for PDF output"
            ) from exc

        playwright = await async_playwright().start()
        try:
            browser = await playwright.chromium.launch(
                executable_path=executable_path,
                headless=self._headless,
            )
        except BaseException:
            await playwright.stop()
            raise
        return PlaywrightBrowser(playwright, browser)


__all__ = [
    "BrowserHandle",
    "BrowserLauncher",
    "PageHandle",
    "PlaywrightBrowser",
    "PlaywrightLauncher",
]
