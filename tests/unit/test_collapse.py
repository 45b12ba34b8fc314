"""Unit tests for single-line collapse of rendered comments."""

from __future__ import annotations

import pytest

from kdocfmt.kdoc.collapse import make_single_line_if_possible


def test_collapse_one_content_line() -> None:
    """A comment with one content line that fits becomes a one-liner."""

    assert make_single_line_if_possible(0, "/**\n * hello world\n */") == "/** hello world */"


def test_collapse_empty_comment() -> None:
    """An empty interior line collapses to `/** */`."""

    assert make_single_line_if_possible(8, "/**\n         * \n         */") == "/** */"


def test_collapse_keeps_multiple_content_lines() -> None:
    """Comments with more than one interior line are returned unchanged."""

    text = "/**\n * first\n * second\n */"

    assert make_single_line_if_possible(0, text) is text


@pytest.mark.parametrize(
    ("block_indent", "content", "collapsed"),
    [
        (0, "1234567890123", True),
        (0, "12345678901234", False),
        (1, "123456789012", True),
        (1, "1234567890123", False),
    ],
)
def test_collapse_respects_remaining_width(
    block_indent: int, content: str, collapsed: bool
) -> None:
    """Content collapses only when `/** content */` fits after the block indent."""

    indent = " " * block_indent
    text = f"/**\n{indent} * {content}\n{indent} */"

    result = make_single_line_if_possible(block_indent, text, max_line_width=20)

    if collapsed:
        assert result == f"/** {content} */"
        assert block_indent + len(result) <= 20
    else:
        assert result == text


def test_collapse_ignores_text_that_is_not_a_rendered_comment() -> None:
    """Input outside the rendered shape passes through."""

    assert make_single_line_if_possible(0, "/** already */") == "/** already */"
