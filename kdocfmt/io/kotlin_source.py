"""Kotlin source driver for KDoc formatting.

Responsibilities:
- Locate KDoc comments in Kotlin source text, skipping strings and other comments.
- Compute each comment's block indentation and splice formatted comments back.

Only comments that start their line (nothing but whitespace before `/**`) are
formatted; a comment trailing code on the same line is left untouched.
"""

from __future__ import annotations

from ..kdoc.formatter import format_kdoc
from ..kdoc.writer import MAX_LINE_WIDTH
from ..models.datatypes import CommentSpan, FormattedSource

_RAW_STRING_QUOTE = '"""'


def find_kdoc_comments(source: str) -> list[CommentSpan]:
    """Return KDoc comments that start a line, in source order."""

    spans: list[CommentSpan] = []
    index = 0
    length = len(source)
    while index < length:
        if source.startswith("//", index):
            newline = source.find("\n", index)
            index = length if newline == -1 else newline + 1
        elif source.startswith("/*", index):
            end = _block_comment_end(source, index)
            text = source[index:end]
            line_start = source.rfind("\n", 0, index) + 1
            if _is_kdoc(text) and not source[line_start:index].strip():
                spans.append(
                    CommentSpan(
                        start=index,
                        end=end,
                        block_indent=index - line_start,
                        text=text,
                    )
                )
            index = end
        elif source.startswith(_RAW_STRING_QUOTE, index):
            index = _raw_string_end(source, index)
        elif source[index] in "\"'":
            index = _quoted_end(source, index)
        else:
            index += 1
    return spans


def format_source(source: str, max_line_width: int = MAX_LINE_WIDTH) -> FormattedSource:
    """Format every KDoc comment in a Kotlin source text.

    Raises:
        KDocFormatError: If any comment fails to format; no partial text is returned.
    """

    spans = find_kdoc_comments(source)
    pieces: list[str] = []
    cursor = 0
    changed_comment_count = 0
    for span in spans:
        formatted = format_kdoc(span.text, span.block_indent, max_line_width)
        if formatted != span.text:
            changed_comment_count += 1
        pieces.append(source[cursor : span.start])
        pieces.append(formatted)
        cursor = span.end
    pieces.append(source[cursor:])
    return FormattedSource(
        text="".join(pieces),
        comment_count=len(spans),
        changed_comment_count=changed_comment_count,
    )


def _is_kdoc(text: str) -> bool:
    """Return whether a block comment is a terminated KDoc comment (not `/**/`)."""

    return len(text) >= 5 and text.startswith("/**") and text.endswith("*/")


def _block_comment_end(source: str, start: int) -> int:
    """Return the exclusive end of a (possibly nested) block comment."""

    depth = 1
    index = start + 2
    length = len(source)
    while index < length:
        if source.startswith("*/", index):
            depth -= 1
            index += 2
            if depth == 0:
                return index
        elif source.startswith("/*", index):
            depth += 1
            index += 2
        else:
            index += 1
    return length


def _raw_string_end(source: str, start: int) -> int:
    """Return the exclusive end of a raw string, including trailing extra quotes."""

    close = source.find(_RAW_STRING_QUOTE, start + len(_RAW_STRING_QUOTE))
    if close == -1:
        return len(source)
    index = close + len(_RAW_STRING_QUOTE)
    while index < len(source) and source[index] == '"':
        index += 1
    return index


def _quoted_end(source: str, start: int) -> int:
    """Return the exclusive end of a string or char literal (stops at line end)."""

    quote = source[start]
    index = start + 1
    length = len(source)
    while index < length:
        character = source[index]
        if character == "\\":
            index += 2
            continue
        if character == quote:
            return index + 1
        if character == "\n":
            return index
        index += 1
    return length
