"""kdocfmt pipeline package.

This package contains orchestration and telemetry helpers for formatting
KDoc comments across source files.
"""

from .orchestrator import KdocfmtPipeline

__all__ = ["KdocfmtPipeline"]
