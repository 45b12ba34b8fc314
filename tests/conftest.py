"""Shared pytest fixtures for the full kdocfmt test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

_UNFORMATTED_SOURCE = """package sample

/**
 * Sample class.
 */
class Sample {
    /**
     *    Returns   the answer.
     */
    fun answer(): Int = 42
}
"""

_FORMATTED_SOURCE = """package sample

/** Sample class. */
class Sample {
    /** Returns the answer. */
    fun answer(): Int = 42
}
"""


@pytest.fixture
def unformatted_source() -> str:
    """Provide Kotlin source with two KDoc comments that need formatting."""

    return _UNFORMATTED_SOURCE


@pytest.fixture
def formatted_source() -> str:
    """Provide the expected formatted form of `unformatted_source`."""

    return _FORMATTED_SOURCE


@pytest.fixture
def write_kotlin(tmp_path: Path) -> Callable[[str, str], Path]:
    """Provide a helper that writes a Kotlin source file below `tmp_path`."""

    def _write(relative_path: str, content: str) -> Path:
        """Write `content` to `relative_path` and return the created file path."""

        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
