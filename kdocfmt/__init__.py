"""Top-level package for kdocfmt.

This package re-flows KDoc comments in Kotlin sources to a maximum line width
and collapses short comments onto one line. The single-comment entry point is
`format_kdoc`; `KdocfmtPipeline` formats whole files.
"""

from .kdoc import format_kdoc
from .pipeline import KdocfmtPipeline

__all__ = ["KdocfmtPipeline", "format_kdoc", "__version__"]

__version__ = "0.1.0"
