"""Unit tests for structured run logging."""

from __future__ import annotations

import io
from pathlib import Path

from kdocfmt.models.datatypes import FileFormatResult
from kdocfmt.telemetry.logger import RunLogger


def test_run_logger_emits_stage_events() -> None:
    """Stage events are rendered as deterministic `[kdocfmt]` lines."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_stage_start("discover")
    run_logger.log_stage_complete("discover", {"files": 2})
    run_logger.log_stage_complete("write")
    run_logger.log_stage_failure("format", "MissingTerminatorError")

    assert sink.getvalue().splitlines() == [
        "[kdocfmt] INFO discover:start",
        "[kdocfmt] INFO discover:complete files=2",
        "[kdocfmt] INFO write:complete",
        "[kdocfmt] ERROR format:failure error_type=MissingTerminatorError",
    ]


def test_run_logger_sorts_and_sanitizes_file_fields() -> None:
    """Fields are sorted by name and unsafe characters in values are replaced."""

    sink = io.StringIO()
    run_logger = RunLogger(sink=sink)

    run_logger.log_file_formatted(
        FileFormatResult(
            path=Path("src/My File.kt"),
            comment_count=3,
            changed_comment_count=1,
            changed=True,
        )
    )
    run_logger.log_file_written(Path("src/{Odd}.kt"))

    assert sink.getvalue().splitlines() == [
        "[kdocfmt] INFO format:file changed=1 comments=3 path=src/My_File.kt",
        "[kdocfmt] INFO write:file path=src/_Odd_.kt",
    ]
