"""Input/output components for kdocfmt.

This package contains source discovery, file storage, and the Kotlin source
driver that locates and replaces KDoc comments.
"""

from .kotlin_source import find_kdoc_comments, format_source
from .storage import SourceStore

__all__ = ["SourceStore", "find_kdoc_comments", "format_source"]
