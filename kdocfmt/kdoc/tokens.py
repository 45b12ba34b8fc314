"""Token model shared by the KDoc scanner, normalizer, and renderer.

Responsibilities:
- Define the raw scanner vocabulary the normalizer classifies.
- Define the closed set of normalized comment events the renderer dispatches on.

Key types:
- `RawTokenType`, `RawToken`: scanner output.
- `TokenKind`, `Token`: normalized comment events.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RawTokenType(Enum):
    """Type tags produced by `KDocLexer`."""

    START = "START"
    END = "END"
    LEADING_ASTERISK = "LEADING_ASTERISK"
    TEXT = "TEXT"
    TAG_NAME = "TAG_NAME"
    CODE_BLOCK_TEXT = "CODE_BLOCK_TEXT"
    MARKDOWN_LINK = "MARKDOWN_LINK"
    MARKDOWN_INLINE_LINK = "MARKDOWN_INLINE_LINK"
    WHITE_SPACE = "WHITE_SPACE"


@dataclass(frozen=True, slots=True)
class RawToken:
    """One typed slice of comment source text.

    Attributes:
        type: Scanner type tag.
        text: Source text covered by the token.
    """

    type: RawTokenType
    text: str


class TokenKind(Enum):
    """Normalized comment events, one writer operation each."""

    BEGIN_KDOC = "BEGIN_KDOC"
    END_KDOC = "END_KDOC"
    BLANK_LINE = "BLANK_LINE"
    WHITESPACE = "WHITESPACE"
    LITERAL = "LITERAL"
    LIST_ITEM_OPEN_TAG = "LIST_ITEM_OPEN_TAG"
    PRE_OPEN_TAG = "PRE_OPEN_TAG"
    PRE_CLOSE_TAG = "PRE_CLOSE_TAG"
    CODE_OPEN_TAG = "CODE_OPEN_TAG"
    CODE_CLOSE_TAG = "CODE_CLOSE_TAG"
    TABLE_OPEN_TAG = "TABLE_OPEN_TAG"
    TABLE_CLOSE_TAG = "TABLE_CLOSE_TAG"


@dataclass(frozen=True, slots=True)
class Token:
    """A normalized comment event.

    Attributes:
        kind: Event kind.
        text: Payload; a word for literals, `" "` for whitespace, empty for
            structural kinds such as blank lines and list item openings.
    """

    kind: TokenKind
    text: str = ""
