from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_PATH = Path("mdpdf.toml")
ENV_PREFIX = "MDPDF_"

MARKDOWN_EXTENSION = ".md"
PDF_EXTENSION = ".pdf"
HTML_EXTENSION = ".html"

WINDOWS_EDGE_PATH = r"C:\Program Files (x86)\Microsoft\Edge\Application\msedge.exe"

USAGE = "mdpdf --src=xxx [--out=xxx] [--outputHTML] [--browser=xxx] [--showTitle]"

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_PREFIX",
    "HTML_EXTENSION",
    "MARKDOWN_EXTENSION",
    "PDF_EXTENSION",
    "USAGE",
    "WINDOWS_EDGE_PATH",
]
