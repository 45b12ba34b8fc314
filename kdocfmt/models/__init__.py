"""Shared typed data models for kdocfmt.

This package contains dataclasses used across modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import CommentSpan, FileFormatResult, FormattedSource, RunSummary

__all__ = [
    "CommentSpan",
    "FileFormatResult",
    "FormattedSource",
    "RunSummary",
]
