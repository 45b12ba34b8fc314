"""Pipeline orchestration for kdocfmt.

Responsibilities:
- Define the stage order for a formatting run: discover, format, write.
- Map stage failures to `PipelineStageError` diagnostics naming the file.

Key types:
- `KdocfmtPipeline`: orchestration facade.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..config import KdocfmtConfig
from ..errors import KDocFormatError, PipelineStageError
from ..io.kotlin_source import format_source
from ..io.storage import SourceStore
from ..models.datatypes import FileFormatResult, RunSummary
from ..telemetry.logger import RunLogger
from .telemetry import PipelineTelemetryMixin


@dataclass(frozen=True, slots=True)
class _FormattedFile:
    """Formatted text for one file, held until the write stage."""

    result: FileFormatResult
    text: str


class KdocfmtPipeline(PipelineTelemetryMixin):
    """Format KDoc comments in Kotlin source files."""

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        stage_progress_callback: Callable[[str, int, int], None] | None = None,
        store: SourceStore | None = None,
    ) -> None:
        """Initialize optional runtime logging, progress reporting, and storage."""

        self._run_logger = run_logger
        self._stage_progress_callback = stage_progress_callback
        self._store = store or SourceStore()
        self._stage_counters: Counter[str] = Counter()

    def run(
        self,
        config: KdocfmtConfig,
        paths: Sequence[Path],
        *,
        check: bool = False,
    ) -> RunSummary:
        """Format every source file under `paths`.

        Args:
            config: Run configuration.
            paths: Files or directories to format.
            check: When true, report changes without writing any file.

        Returns:
            Per-file results in discovery order.
        """

        max_line_width = self._resolve_line_width(config)
        files = self._run_stage("discover", lambda: self._discover(config, paths))
        formatted = self._run_stage(
            "format",
            lambda: [self._format_file(path, max_line_width) for path in files],
        )
        if not check:
            self._run_stage("write", lambda: self._write(formatted))
        return RunSummary(
            results=tuple(item.result for item in formatted),
            checked_only=check,
        )

    def _resolve_line_width(self, config: KdocfmtConfig) -> int:
        """Validate config and resolve the effective maximum line width."""

        try:
            config.validate()
            return config.resolved_max_line_width(config.runtime_sources)
        except ValueError as exc:
            raise PipelineStageError(
                stage="config",
                detail=f"Invalid configuration: {exc}",
                hint="Fix the config file, environment, or CLI values and rerun.",
            ) from exc

    def _discover(self, config: KdocfmtConfig, paths: Sequence[Path]) -> list[Path]:
        """Find the source files a run covers."""

        if not paths:
            raise PipelineStageError(
                stage="discover",
                detail="No source paths were given.",
                hint="Pass one or more Kotlin files or directories.",
            )
        try:
            files = self._store.discover(paths, config.extensions, config.exclude)
        except FileNotFoundError as exc:
            raise PipelineStageError(
                stage="discover",
                detail=str(exc),
                hint="Verify the path exists and rerun.",
            ) from exc
        self._on_files_discovered(files)
        return files

    def _format_file(self, path: Path, max_line_width: int) -> _FormattedFile:
        """Format one file's KDoc comments in memory."""

        try:
            original = self._store.load_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise PipelineStageError(
                stage="format",
                detail=f"Failed to read `{path}`: {exc}",
                hint="Verify the file is readable UTF-8 text.",
            ) from exc

        try:
            formatted = format_source(original, max_line_width)
        except (KDocFormatError, ValueError) as exc:
            raise PipelineStageError(
                stage="format",
                detail=f"Failed to format KDoc in `{path}`: {exc}",
                hint="This is a formatter defect; please report the comment that triggered it.",
            ) from exc

        result = FileFormatResult(
            path=path,
            comment_count=formatted.comment_count,
            changed_comment_count=formatted.changed_comment_count,
            changed=formatted.text != original,
        )
        self._on_file_formatted(result)
        return _FormattedFile(result=result, text=formatted.text)

    def _write(self, formatted: list[_FormattedFile]) -> None:
        """Write back files whose content changed."""

        for item in formatted:
            if not item.result.changed:
                continue
            try:
                self._store.save_text(item.result.path, item.text)
            except OSError as exc:
                raise PipelineStageError(
                    stage="write",
                    detail=f"Failed to write `{item.result.path}`: {exc}",
                    hint="Verify file permissions and rerun.",
                ) from exc
            self._on_file_written(item.result.path)
