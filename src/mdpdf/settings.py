from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from .constraint import DEFAULT_CONFIG_PATH, ENV_PREFIX, WINDOWS_EDGE_PATH


@dataclass(frozen=True, slots=True)
class Settings:
    """Application runtime settings sourced from environment variables."""

    config_path: Path = DEFAULT_CONFIG_PATH


def _read_settings() -> Settings:
    config_env = os.getenv(f"{ENV_PREFIX}CONFIG_PATH")
    config_path = Path(config_env) if config_env else DEFAULT_CONFIG_PATH
    return Settings(config_path=config_path)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return _read_settings()


def detect_default_browser(platform: str | None = None) -> str | None:
    """Return the browser executable assumed present on ``platform``.

    Only Windows ships a predictable Chromium-based browser (Edge). Elsewhere
    the caller has to name one through ``--browser`` or the config file.
    """

    platform = platform or sys.platform
    if platform.startswith("win"):
        return WINDOWS_EDGE_PATH
    return None


__all__ = ["Settings", "detect_default_browser", "get_settings"]
