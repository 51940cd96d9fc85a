"""Resolution of ``--key=value`` command line arguments into render options.

Only string and path arithmetic happens here: nothing touches the disk and the
platform default browser is supplied by the caller.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from .constraint import MARKDOWN_EXTENSION, PDF_EXTENSION
from .errors import ParameterError
from .models import RenderOptions
from .utils import swap_suffix

SRC_KEY = "--src"
OUT_KEY = "--out"
BROWSER_KEY = "--browser"
OUTPUT_HTML_FLAG = "--outputHTML"
SHOW_TITLE_FLAG = "--showTitle"

VALUE_KEYS = frozenset({SRC_KEY, OUT_KEY, BROWSER_KEY})
FLAG_KEYS = frozenset({OUTPUT_HTML_FLAG, SHOW_TITLE_FLAG})


def _split_argument(arg: str) -> tuple[str, str | None]:
    key, sep, value = arg.partition("=")
    return key, (value if sep else None)


def _require_value(key: str, value: str | None) -> str:
    if value is None or value == "":
        raise ParameterError("MISSING_VALUE", f"{key} requires a value")
    if "=" in value:
        raise ParameterError("MALFORMED_VALUE", f"{key} has a malformed value: {value}")
    return value


def resolve_path(cwd: str | os.PathLike[str], value: str, extension: str) -> Path:
    """Resolve ``value`` against ``cwd``, appending ``extension`` when absent."""

    if not value.endswith(extension):
        value += extension
    return Path(os.path.abspath(os.path.join(os.fspath(cwd), value)))


def resolve_options(
    args: Sequence[str],
    cwd: str | os.PathLike[str],
    *,
    default_browser: str | None = None,
) -> RenderOptions:
    src: Path | None = None
    out: Path | None = None
    browser: str | None = None
    output_html = False
    show_title = False

    for arg in args:
        key, value = _split_argument(arg)
        if key in FLAG_KEYS:
            if value is not None:
                raise ParameterError("FLAG_WITH_VALUE", f"{key} does not take a value")
            if key == OUTPUT_HTML_FLAG:
                output_html = True
            else:
                show_title = True
        elif key == SRC_KEY:
            src = resolve_path(cwd, _require_value(key, value), MARKDOWN_EXTENSION)
        elif key == OUT_KEY:
            out = resolve_path(cwd, _require_value(key, value), PDF_EXTENSION)
        elif key == BROWSER_KEY:
            browser = _require_value(key, value)
        else:
            raise ParameterError("UNKNOWN_ARGUMENT", f"Unrecognized argument: {arg}")

    if src is None:
        raise ParameterError("MISSING_SRC", f"{SRC_KEY} is required")
    if out is None:
        out = swap_suffix(src, MARKDOWN_EXTENSION, PDF_EXTENSION)
    browser = browser or default_browser
    if not browser:
        raise ParameterError(
            "MISSING_BROWSER",
            f"{BROWSER_KEY} is required: no default browser is known for this platform",
        )

    return RenderOptions(
        src=src,
        out=out,
        output_html=output_html,
        show_title=show_title,
        browser=browser,
    )


__all__ = ["resolve_options", "resolve_path"]
