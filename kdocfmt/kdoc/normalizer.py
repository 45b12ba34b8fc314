"""Raw token normalization for KDoc formatting.

Responsibilities:
- Translate the scanner vocabulary into the renderer's `Token` events.
- Split prose into one literal per word and mark bullet list items.
- Fail fast on any raw token type without a classification rule.
"""

from __future__ import annotations

from collections.abc import Iterable
import re

from ..errors import UnclassifiedTokenError
from .tokens import RawToken, RawTokenType, Token, TokenKind

_WORD_SEPARATOR_PATTERN = re.compile("[ \t]+")
_LIST_ITEM_MARKER = "-"
_JOINING_PREDECESSORS = frozenset(
    {
        RawTokenType.TAG_NAME,
        RawTokenType.MARKDOWN_LINK,
        RawTokenType.MARKDOWN_INLINE_LINK,
    }
)


def normalize(raw_tokens: Iterable[RawToken]) -> tuple[Token, ...]:
    """Normalize a raw scanner stream into renderer tokens.

    Every raw token is consumed exactly once, in order. Whitespace directly after
    a tag name or a link becomes a single joining space; any other raw whitespace
    is a line break request.

    Args:
        raw_tokens: Scanner output, consumed until exhausted.

    Returns:
        Ordered normalized tokens.

    Raises:
        UnclassifiedTokenError: If a raw token type has no classification rule.
    """

    tokens: list[Token] = []
    previous_type: RawTokenType | None = None
    for raw_token in raw_tokens:
        token_type = raw_token.type
        token_text = raw_token.text
        if token_type is RawTokenType.START:
            tokens.append(Token(TokenKind.BEGIN_KDOC, token_text))
        elif token_type is RawTokenType.LEADING_ASTERISK:
            pass
        elif token_type is RawTokenType.END:
            tokens.append(Token(TokenKind.END_KDOC, token_text))
        elif token_type is RawTokenType.TEXT:
            tokens.extend(_split_words(token_text))
        elif token_type is RawTokenType.TAG_NAME:
            tokens.append(Token(TokenKind.LITERAL, token_text.strip()))
        elif token_type is RawTokenType.CODE_BLOCK_TEXT:
            code_text = token_text[1:] if token_text.startswith(" ") else token_text
            tokens.append(Token(TokenKind.LITERAL, code_text))
        elif token_type is RawTokenType.MARKDOWN_INLINE_LINK:
            tokens.append(Token(TokenKind.LITERAL, token_text))
        elif token_type is RawTokenType.MARKDOWN_LINK:
            tokens.append(Token(TokenKind.LITERAL, token_text))
        elif token_type is RawTokenType.WHITE_SPACE:
            if previous_type in _JOINING_PREDECESSORS:
                tokens.append(Token(TokenKind.WHITESPACE, " "))
            else:
                tokens.append(Token(TokenKind.BLANK_LINE, ""))
        else:
            raise UnclassifiedTokenError(token_type)

        previous_type = token_type
    return tuple(tokens)


def _split_words(text: str) -> list[Token]:
    """Return literal/space token pairs for each word of a prose run."""

    trimmed = text.strip()
    if not trimmed:
        return []

    words = _WORD_SEPARATOR_PATTERN.split(trimmed)
    tokens: list[Token] = []
    if words[0] == _LIST_ITEM_MARKER:
        tokens.append(Token(TokenKind.LIST_ITEM_OPEN_TAG, ""))
    for word in words:
        tokens.append(Token(TokenKind.LITERAL, word))
        tokens.append(Token(TokenKind.WHITESPACE, " "))
    return tokens
