from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping

from .constraint import DEFAULT_CONFIG_PATH


DEFAULT_MARKDOWN_EXTENSIONS: tuple[str, ...] = ("extra", "sane_lists")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be read or parsed."""


@dataclass(slots=True)
class RuntimeConfig:
    browser: str | None = None
    log_file: Path | None = None


@dataclass(slots=True)
class MarkdownConfig:
    extensions: tuple[str, ...] = DEFAULT_MARKDOWN_EXTENSIONS


@dataclass(slots=True)
class AppConfig:
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    markdown: MarkdownConfig = field(default_factory=MarkdownConfig)


def _read_toml(path: Path) -> Mapping[str, object]:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Cannot load configuration {path}: {exc}") from exc


def _optional_str(value: object | None) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_runtime(data: Mapping[str, object] | None) -> RuntimeConfig:
    if not data:
        return RuntimeConfig()
    log_file = _optional_str(data.get("log_file"))
    return RuntimeConfig(
        browser=_optional_str(data.get("browser")),
        log_file=Path(log_file) if log_file else None,
    )


def _tuple_of_strings(value: object | None, default: Iterable[str]) -> tuple[str, ...]:
    if value is None:
        return tuple(default)
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(str(item) for item in value)
    raise ConfigError(f"Unsupported markdown extensions configuration: {value!r}")


def _build_markdown(data: Mapping[str, object] | None) -> MarkdownConfig:
    if not data:
        return MarkdownConfig()
    return MarkdownConfig(
        extensions=_tuple_of_strings(data.get("extensions"), DEFAULT_MARKDOWN_EXTENSIONS),
    )


def load_config(path: Path | None = None) -> AppConfig:
    path = path or DEFAULT_CONFIG_PATH
    raw = _read_toml(path)
    runtime_data = raw.get("runtime") if isinstance(raw, Mapping) else None
    markdown_data = raw.get("markdown") if isinstance(raw, Mapping) else None
    runtime = _build_runtime(runtime_data if isinstance(runtime_data, Mapping) else None)
    markdown = _build_markdown(markdown_data if isinstance(markdown_data, Mapping) else None)
    return AppConfig(runtime=runtime, markdown=markdown)

