"""Structured run logging for kdocfmt.

Responsibilities:
- Emit one deterministic `[kdocfmt]` line per run event through `loguru`.
- Carry event fields as bound `loguru` extras and render them in sorted order.
- Keep stdout free for formatted output by logging to stderr by default.

Key public types:
- `RunLogger`: event-level logging facade used by the pipeline.
"""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Any, TextIO

from loguru import logger as _loguru_logger

from ..models.datatypes import FileFormatResult

_EVENT_FIELDS = ("stage", "event")


def _sanitize_field_value(value: object) -> str:
    """Convert a field value into a stable, shell-safe token."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _render_record(record: dict[str, Any]) -> str:
    """Render a bound record as `[kdocfmt] LEVEL stage:event key=value ...`."""

    fields = dict(record["extra"])
    stage, event = (_sanitize_field_value(fields.pop(name, "")) for name in _EVENT_FIELDS)
    line = f"[kdocfmt] {record['level'].name} {stage}:{event}"
    for key in sorted(fields):
        line += f" {key}={_sanitize_field_value(fields[key])}"
    # The returned text is a loguru template, so braces must be literal.
    return line.replace("{", "{{").replace("}", "}}") + "\n"


class RunLogger:
    """Log stage transitions and per-file formatting events."""

    def __init__(self, sink: TextIO | None = None) -> None:
        """Route loguru output to `sink` (stderr by default) with event rendering."""

        self._sink = sink if sink is not None else sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format=_render_record, level="INFO", colorize=False)

    def _emit(self, level: str, stage: str, event: str, **fields: object) -> None:
        """Log one event with its fields bound as extras."""

        _loguru_logger.bind(stage=stage, event=event, **fields).log(level, event)

    def log_stage_start(self, stage: str) -> None:
        """Log that a stage started."""

        self._emit("INFO", stage, "start")

    def log_stage_complete(self, stage: str, counters: dict[str, int] | None = None) -> None:
        """Log that a stage completed, with the counters it accumulated."""

        self._emit("INFO", stage, "complete", **(counters or {}))

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Log a stage failure by exception type only; source text is never logged."""

        self._emit("ERROR", stage, "failure", error_type=error_type)

    def log_file_formatted(self, result: FileFormatResult) -> None:
        """Log comment counts for one formatted file."""

        self._emit(
            "INFO",
            "format",
            "file",
            path=result.path.as_posix(),
            comments=result.comment_count,
            changed=result.changed_comment_count,
        )

    def log_file_written(self, path: Path) -> None:
        """Log that one file was rewritten."""

        self._emit("INFO", "write", "file", path=path.as_posix())
