"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
import typer

from kdocfmt.cli_rendering import echo_run_summary, exit_with_command_error
from kdocfmt.errors import PipelineStageError
from kdocfmt.models import FileFormatResult, RunSummary


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = PipelineStageError(
        stage="discover",
        detail="Source path not found: `missing`.",
        hint="Verify the path exists and rerun.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("format", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "format failed at stage `discover`: Source path not found" in captured.err
    assert "Hint: Verify the path exists and rerun." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("comment", RuntimeError("unexpected failure"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "comment failed: unexpected failure" in captured.err


def test_echo_run_summary_lists_changed_files(capsys: pytest.CaptureFixture[str]) -> None:
    """Summary output names changed files and prints run counters."""

    summary = RunSummary(
        results=(
            FileFormatResult(Path("A.kt"), comment_count=2, changed_comment_count=1, changed=True),
            FileFormatResult(Path("B.kt"), comment_count=1, changed_comment_count=0, changed=False),
        ),
        checked_only=True,
    )

    echo_run_summary(summary)

    assert capsys.readouterr().out.splitlines() == [
        "Would reformat: A.kt",
        "Files checked: 2",
        "Files changed: 1",
        "Comments changed: 1",
    ]
