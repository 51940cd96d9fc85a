from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

PDF_BYTES = b"%PDF-1.4\n% fake\n"


class FakePage:
    def __init__(self, launcher: "FakeLauncher") -> None:
        self._launcher = launcher
        self.content: str | None = None
        self.pdf_options: dict[str, Any] | None = None

    async def set_content(self, html: str) -> None:
        self._launcher.events.append("set_content")
        self.content = html

    async def pdf(self, **options: Any) -> bytes:
        self._launcher.events.append("pdf")
        self.pdf_options = options
        if self._launcher.fail_print:
            raise RuntimeError("Target closed")
        return PDF_BYTES


class FakeBrowser:
    def __init__(self, launcher: "FakeLauncher") -> None:
        self._launcher = launcher
        self.pages: list[FakePage] = []
        self.close_calls = 0

    async def new_page(self) -> FakePage:
        self._launcher.events.append("new_page")
        page = FakePage(self._launcher)
        self.pages.append(page)
        return page

    async def close(self) -> None:
        self._launcher.events.append("close")
        self.close_calls += 1
        if self._launcher.fail_close:
            raise ConnectionError("Browser has been closed")


class FakeLauncher:
    payload = PDF_BYTES

    def __init__(
        self,
        *,
        fail_launch: bool = False,
        fail_print: bool = False,
        fail_close: bool = False,
        watch: Path | None = None,
    ) -> None:
        self.fail_launch = fail_launch
        self.fail_print = fail_print
        self.fail_close = fail_close
        self.watch = watch
        self.watched_exists: list[bool] = []
        self.executables: list[str] = []
        self.browsers: list[FakeBrowser] = []
        self.events: list[str] = []

    async def launch(self, executable_path: str) -> FakeBrowser:
        self.executables.append(executable_path)
        if self.watch is not None:
            self.watched_exists.append(self.watch.exists())
        if self.fail_launch:
            raise FileNotFoundError(f"Browser executable not found: {executable_path}")
        self.events.append("launch")
        browser = FakeBrowser(self)
        self.browsers.append(browser)
        return browser

    @property
    def page(self) -> FakePage:
        return self.browsers[-1].pages[-1]


@pytest.fixture
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def make_launcher():
    return FakeLauncher


@pytest.fixture
def manuscript(tmp_path: Path) -> Path:
    source = tmp_path / "paper.md"
    source.write_text(
        "# 基于深度学习的图像分割方法\n\n"
        '<div class="abstract" markdown="1">\n**摘要**: 本文提出一种方法。\n</div>\n\n'
        "## 引言\n\nBody text.\n",
        encoding="utf-8",
    )
    return source
