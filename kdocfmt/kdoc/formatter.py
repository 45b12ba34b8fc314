"""Entry point for formatting one KDoc comment.

The formatter holds no state: each call scans, normalizes, renders, and
collapses its own comment, so calls are independent of each other.
"""

from __future__ import annotations

from .collapse import make_single_line_if_possible
from .lexer import KDocLexer
from .normalizer import normalize
from .renderer import render
from .writer import MAX_LINE_WIDTH


def format_kdoc(text: str, block_indent: int, max_line_width: int = MAX_LINE_WIDTH) -> str:
    """Format a KDoc comment that starts with `/**` and ends with `*/`.

    Args:
        text: Comment source, markers included.
        block_indent: Column of the opening marker in the enclosing source.
        max_line_width: Maximum output line width, indentation included.

    Returns:
        The single-line form when the content fits, otherwise the re-flowed
        multi-line form. Both start with `/**` and end with `*/`.

    Raises:
        ValueError: If `text` is not delimited by the KDoc markers.
        KDocFormatError: If scanning and rendering fall out of sync.
    """

    tokens = normalize(KDocLexer().tokenize(text))
    rendered = render(tokens, block_indent, max_line_width)
    return make_single_line_if_possible(block_indent, rendered, max_line_width)
