"""KDoc comment scanner.

Responsibilities:
- Split one `/** ... */` comment into `RawToken` values over a fixed vocabulary.
- Track fenced code regions so fence lines and code lines are reported verbatim.
- Report whitespace that follows a tag name or a link separately from prose,
  so the normalizer can join those with a single space.

Key public types:
- `KDocLexer`: stateless scanner; `tokenize` yields tokens in source order.
"""

from __future__ import annotations

from collections.abc import Iterator
import re

from .tokens import RawToken, RawTokenType

_OPEN_MARKER = "/**"
_CLOSE_MARKER = "*/"
_LINE_BREAK_PATTERN = re.compile(r"(\r?\n[ \t]*)")
_HORIZONTAL_SPACE_PATTERN = re.compile(r"[ \t]+")
_LEADING_TAG_PATTERN = re.compile(r"([ \t]*)(@[A-Za-z][\w-]*)")
_TAG_SUBJECT_PATTERN = re.compile(r"[^ \t]+")
_FENCE_PATTERN = re.compile(r"[ \t]*(`{3,}|~{3,})")
_INLINE_LINK_PATTERN = re.compile(r"\[[^\]\n]+\]\([^)\s]*\)")
_REFERENCE_LINK_PATTERN = re.compile(r"\[[^\]\n]+\](?:\[[^\]\n]*\])?")

# Tags whose first argument names a declaration or type.
_SUBJECT_TAGS = frozenset(
    {
        "@param",
        "@property",
        "@throws",
        "@exception",
        "@see",
        "@sample",
    }
)


class KDocLexer:
    """Scan KDoc comment text into raw typed tokens."""

    def tokenize(self, text: str) -> Iterator[RawToken]:
        """Yield raw tokens for a comment that starts with `/**` and ends with `*/`.

        Raises:
            ValueError: If the text is not delimited by the KDoc markers.
        """

        if (
            len(text) < len(_OPEN_MARKER) + len(_CLOSE_MARKER)
            or not text.startswith(_OPEN_MARKER)
            or not text.endswith(_CLOSE_MARKER)
        ):
            raise ValueError("KDoc text must start with `/**` and end with `*/`.")
        return self._scan(text[len(_OPEN_MARKER) : -len(_CLOSE_MARKER)])

    def _scan(self, body: str) -> Iterator[RawToken]:
        """Yield tokens for the comment body framed by the start and end markers."""

        yield RawToken(RawTokenType.START, _OPEN_MARKER)
        pieces = _LINE_BREAK_PATTERN.split(body)
        fence: str | None = None
        for index in range(0, len(pieces), 2):
            line = pieces[index]
            if index > 0:
                yield RawToken(RawTokenType.WHITE_SPACE, pieces[index - 1])
                if line.startswith("*"):
                    yield RawToken(RawTokenType.LEADING_ASTERISK, "*")
                    line = line[1:]
            if fence is not None:
                fence = yield from self._scan_code_line(line, fence)
            else:
                fence = yield from self._scan_prose_line(line)
        yield RawToken(RawTokenType.END, _CLOSE_MARKER)

    def _scan_code_line(self, line: str, fence: str) -> Iterator[RawToken]:
        """Yield tokens for one line inside a fenced block; return the open fence."""

        closing = _FENCE_PATTERN.match(line)
        if closing and closing.group(1)[0] == fence[0] and len(closing.group(1)) >= len(fence):
            yield RawToken(RawTokenType.CODE_BLOCK_TEXT, line)
            return None
        if line.strip():
            yield RawToken(RawTokenType.CODE_BLOCK_TEXT, line)
        return fence

    def _scan_prose_line(self, line: str) -> Iterator[RawToken]:
        """Yield tokens for one prose line; return the fence it opens, if any."""

        opening = _FENCE_PATTERN.match(line)
        if opening:
            yield RawToken(RawTokenType.CODE_BLOCK_TEXT, line)
            return opening.group(1)

        position = 0
        last_type: RawTokenType | None = None
        tag = _LEADING_TAG_PATTERN.match(line)
        if tag:
            if tag.group(1):
                yield RawToken(RawTokenType.TEXT, tag.group(1))
            yield RawToken(RawTokenType.TAG_NAME, tag.group(2))
            last_type = RawTokenType.TAG_NAME
            position = tag.end()
            space = _HORIZONTAL_SPACE_PATTERN.match(line, position)
            if space:
                yield RawToken(RawTokenType.WHITE_SPACE, space.group())
                last_type = RawTokenType.WHITE_SPACE
                position = space.end()
                subject = _TAG_SUBJECT_PATTERN.match(line, position)
                if subject and tag.group(2) in _SUBJECT_TAGS:
                    yield RawToken(RawTokenType.MARKDOWN_LINK, subject.group())
                    last_type = RawTokenType.MARKDOWN_LINK
                    position = yield from self._joining_space(line, subject.end())
                    if position > subject.end():
                        last_type = RawTokenType.WHITE_SPACE

        text_start = position
        while position < len(line):
            if line[position] == "[" and (position == 0 or line[position - 1] in " \t"):
                link_type, link = self._match_link(line, position)
                if link is not None:
                    if position > text_start:
                        yield RawToken(RawTokenType.TEXT, line[text_start:position])
                    yield RawToken(link_type, link.group())
                    last_type = link_type
                    position = yield from self._joining_space(line, link.end())
                    if position > link.end():
                        last_type = RawTokenType.WHITE_SPACE
                    text_start = position
                    continue
            position += 1

        if text_start < len(line):
            yield RawToken(RawTokenType.TEXT, line[text_start:])
        elif last_type in (
            RawTokenType.TAG_NAME,
            RawTokenType.MARKDOWN_LINK,
            RawTokenType.MARKDOWN_INLINE_LINK,
        ):
            # The line ends on a tag or link: keep the line break a line break.
            yield RawToken(RawTokenType.TEXT, "")
        return None

    @staticmethod
    def _joining_space(line: str, position: int) -> Iterator[RawToken]:
        """Yield horizontal whitespace after a tag or link; return the next position."""

        space = _HORIZONTAL_SPACE_PATTERN.match(line, position)
        if not space:
            return position
        yield RawToken(RawTokenType.WHITE_SPACE, space.group())
        return space.end()

    @staticmethod
    def _match_link(line: str, position: int) -> tuple[RawTokenType, re.Match[str] | None]:
        """Match an inline or reference-style Markdown link at a position."""

        inline = _INLINE_LINK_PATTERN.match(line, position)
        if inline:
            return RawTokenType.MARKDOWN_INLINE_LINK, inline
        return RawTokenType.MARKDOWN_LINK, _REFERENCE_LINK_PATTERN.match(line, position)
