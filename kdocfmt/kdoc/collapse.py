"""Single-line collapse of rendered KDoc comments."""

from __future__ import annotations

import re

from .writer import MAX_LINE_WIDTH

_ONE_CONTENT_LINE_PATTERN = re.compile(r" */\*\*\n *\* (.*)\n *\*/")
_EMPTY_KDOC = "/** */"
_ONE_LINER_FRAME = "/**  */"


def make_single_line_if_possible(
    block_indent: int,
    text: str,
    max_line_width: int = MAX_LINE_WIDTH,
) -> str:
    """Return `text` as `/** content */` when it has one content line that fits.

    An empty single-line comment becomes `/** */`. Anything else, including
    content longer than the remaining width, is returned unchanged.
    """

    match = _ONE_CONTENT_LINE_PATTERN.fullmatch(text)
    if match is None:
        return text
    content = match.group(1)
    if not content:
        return _EMPTY_KDOC
    one_liner_content_length = max_line_width - len(_ONE_LINER_FRAME) - block_indent
    if len(content) <= one_liner_content_length:
        return f"/** {content} */"
    return text
