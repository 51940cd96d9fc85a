from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any


@dataclass(slots=True)
class StageTimings:
    read_ms: float = 0.0
    render_ms: float = 0.0
    compose_ms: float = 0.0
    print_ms: float = 0.0


@dataclass(slots=True)
class RunLogEntry:
    source: str | None
    output_path: str | None
    html_path: str | None
    status: str
    error_code: str | None
    message: str | None
    timings: StageTimings

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["timings"] = asdict(self.timings)
        return payload


class RunLogger:
    def __init__(self, log_file: Path) -> None:
        self._log_file = log_file

    def append(self, entry: RunLogEntry) -> None:
        self._log_file.parent.mkdir(parents=True, exist_ok=True)
        line = json.dumps(entry.to_dict(), ensure_ascii=False)
        with self._log_file.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")


__all__ = ["RunLogEntry", "RunLogger", "StageTimings"]
