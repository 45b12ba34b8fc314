"""Token-to-writer dispatch for KDoc rendering.

Responsibilities:
- Walk normalized tokens once and issue one writer request per token.
- Stop at the end-of-comment token and return the writer's text.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..errors import MissingTerminatorError
from .tokens import Token, TokenKind
from .writer import MAX_LINE_WIDTH, KDocWriter

_WriterRequest = Callable[[KDocWriter, Token], None]

_DISPATCH: dict[TokenKind, _WriterRequest] = {
    TokenKind.BEGIN_KDOC: lambda writer, token: writer.write_begin_kdoc(),
    TokenKind.LIST_ITEM_OPEN_TAG: KDocWriter.write_list_item_open,
    TokenKind.PRE_OPEN_TAG: KDocWriter.write_pre_open,
    TokenKind.PRE_CLOSE_TAG: KDocWriter.write_pre_close,
    TokenKind.CODE_OPEN_TAG: KDocWriter.write_code_open,
    TokenKind.CODE_CLOSE_TAG: KDocWriter.write_code_close,
    TokenKind.TABLE_OPEN_TAG: KDocWriter.write_table_open,
    TokenKind.TABLE_CLOSE_TAG: KDocWriter.write_table_close,
    TokenKind.BLANK_LINE: lambda writer, token: writer.write_kdoc_whitespace(),
    TokenKind.WHITESPACE: lambda writer, token: writer.request_whitespace(),
    TokenKind.LITERAL: KDocWriter.write_literal,
}

_UNDISPATCHED_KINDS = set(TokenKind) - set(_DISPATCH) - {TokenKind.END_KDOC}
if _UNDISPATCHED_KINDS:
    raise RuntimeError(
        "Renderer has no writer request for token kinds: "
        + ", ".join(sorted(kind.name for kind in _UNDISPATCHED_KINDS))
    )


def render(
    tokens: Iterable[Token],
    block_indent: int,
    max_line_width: int = MAX_LINE_WIDTH,
) -> str:
    """Render normalized tokens into multi-line KDoc text.

    Raises:
        MissingTerminatorError: If the tokens run out before `END_KDOC`.
    """

    output = KDocWriter(block_indent, max_line_width)
    for token in tokens:
        if token.kind is TokenKind.END_KDOC:
            output.write_end_kdoc()
            return str(output)
        _DISPATCH[token.kind](output, token)
    raise MissingTerminatorError()
