"""KDoc comment formatting components.

This package provides the scanner, normalizer, renderer, writer, and
single-line collapse pass behind `format_kdoc`.
"""

from .collapse import make_single_line_if_possible
from .formatter import format_kdoc
from .lexer import KDocLexer
from .normalizer import normalize
from .renderer import render
from .tokens import RawToken, RawTokenType, Token, TokenKind
from .writer import MAX_LINE_WIDTH, KDocWriter

__all__ = [
    "MAX_LINE_WIDTH",
    "KDocLexer",
    "KDocWriter",
    "RawToken",
    "RawTokenType",
    "Token",
    "TokenKind",
    "format_kdoc",
    "make_single_line_if_possible",
    "normalize",
    "render",
]
