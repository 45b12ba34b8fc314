"""Stage telemetry for the kdocfmt pipeline.

Responsibilities:
- Report stage position to the progress callback.
- Accumulate per-stage counters (files, comments, changed comments, writes)
  and log them when the stage completes.
- Log per-file events so the orchestrator never talks to the logger directly.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeVar

from ..models.datatypes import FileFormatResult
from ..telemetry.logger import RunLogger

_StageResult = TypeVar("_StageResult")


class PipelineTelemetryMixin:
    """Stage wrappers and per-file hooks for `KdocfmtPipeline`."""

    _PHASE_SEQUENCE = (
        "discover",
        "format",
        "write",
    )

    _run_logger: RunLogger | None
    _stage_progress_callback: Callable[[str, int, int], None] | None
    _stage_counters: Counter[str]

    def _stage_position(self, stage_name: str) -> tuple[int, int] | None:
        """Return 1-based stage index and total stage count for known stages."""

        try:
            index = self._PHASE_SEQUENCE.index(stage_name) + 1
        except ValueError:
            return None
        return index, len(self._PHASE_SEQUENCE)

    def _on_files_discovered(self, paths: Sequence[Path]) -> None:
        """Count the files a run will format."""

        self._stage_counters["files"] += len(paths)

    def _on_file_formatted(self, result: FileFormatResult) -> None:
        """Count one formatted file's comments and log them."""

        self._stage_counters["files"] += 1
        self._stage_counters["comments"] += result.comment_count
        self._stage_counters["changed"] += result.changed_comment_count
        if self._run_logger is not None:
            self._run_logger.log_file_formatted(result)

    def _on_file_written(self, path: Path) -> None:
        """Count and log one rewritten file."""

        self._stage_counters["written"] += 1
        if self._run_logger is not None:
            self._run_logger.log_file_written(path)

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
    ) -> _StageResult:
        """Run one named stage with fresh counters and start/complete/failure events."""

        self._stage_counters = Counter()
        stage_position = self._stage_position(stage_name)
        if stage_position and self._stage_progress_callback is not None:
            self._stage_progress_callback(stage_name, *stage_position)
        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)

        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise

        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage_name, dict(self._stage_counters))
        return result
