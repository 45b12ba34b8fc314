"""Core datatypes shared across kdocfmt modules.

Responsibilities:
- Represent immutable records exchanged between the source driver and pipeline.
- Provide explicit typing for per-file and per-run results.

Key types:
- `CommentSpan`, `FormattedSource`, `FileFormatResult`, and `RunSummary`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CommentSpan:
    """A KDoc comment located in source text.

    Attributes:
        start: Offset of the opening `/**`.
        end: Exclusive offset just past the closing `*/`.
        block_indent: Column of the opening marker.
        text: Comment source, markers included.
    """

    start: int
    end: int
    block_indent: int
    text: str


@dataclass(frozen=True, slots=True)
class FormattedSource:
    """Source text after every KDoc comment was formatted.

    Attributes:
        text: Resulting source text.
        comment_count: Number of KDoc comments found.
        changed_comment_count: Number of comments whose text changed.
    """

    text: str
    comment_count: int
    changed_comment_count: int


@dataclass(frozen=True, slots=True)
class FileFormatResult:
    """Formatting outcome for one source file.

    Attributes:
        path: Source file path.
        comment_count: Number of KDoc comments found.
        changed_comment_count: Number of comments whose text changed.
        changed: Whether the file content differs after formatting.
    """

    path: Path
    comment_count: int
    changed_comment_count: int
    changed: bool


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Outcome of one pipeline run.

    Attributes:
        results: Per-file results in discovery order.
        checked_only: Whether the run only checked files without writing them.
    """

    results: tuple[FileFormatResult, ...] = field(default_factory=tuple)
    checked_only: bool = False

    @property
    def files_changed(self) -> int:
        """Return the number of files whose content changed (or would change)."""

        return sum(1 for result in self.results if result.changed)

    @property
    def comments_changed(self) -> int:
        """Return the number of comments whose text changed (or would change)."""

        return sum(result.changed_comment_count for result in self.results)
