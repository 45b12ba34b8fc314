"""Line-filling output sink for KDoc rendering.

Responsibilities:
- Own column tracking, continuation markers, and block indentation.
- Decide whether a requested space is written or becomes a wrapped line.
- Resolve pending line break requests lazily so leading and trailing breaks
  never produce empty lines.

Key public types:
- `KDocWriter`: one instance per rendered comment.
"""

from __future__ import annotations

from .tokens import Token

MAX_LINE_WIDTH = 100


class KDocWriter:
    """Accumulate one formatted KDoc comment.

    Interior lines are rendered as `" " * block_indent + " *"`, followed by a space
    and the line content when the line is not empty. The opening line is written
    without indentation because the enclosing source already provides it.
    """

    def __init__(self, block_indent: int, max_line_width: int = MAX_LINE_WIDTH) -> None:
        """Initialize an empty writer for a comment starting at `block_indent`."""

        self._block_indent = block_indent
        self._max_line_width = max_line_width
        self._output: list[str] = []
        self._column = 0
        self._at_start_of_line = True
        self._wrote_anything_significant = False
        self._requested_whitespace = False
        self._requested_line_breaks = 0
        self._verbatim_depth = 0
        self._list_item_pending = False
        self._keep_next_space = False

    def write_begin_kdoc(self) -> None:
        """Write the opening marker and start the first interior line."""

        self._append("/**")
        self._write_newline()

    def write_end_kdoc(self) -> None:
        """Write the closing marker on its own line, dropping pending requests."""

        if not self._wrote_anything_significant:
            # Keep the `* ` interior line the single-line pass recognizes.
            self._append(" ")
        self._append("\n")
        self._append(" " * self._block_indent)
        self._append(" */")
        self._requested_line_breaks = 0
        self._requested_whitespace = False

    def write_list_item_open(self, token: Token) -> None:
        """Start a bullet list item.

        A marker that starts its line stays on the line of the item's first word.
        """

        _ = token
        self._list_item_pending = True

    def write_pre_open(self, token: Token) -> None:
        """Open a preformatted region."""

        _ = token
        self._open_verbatim()

    def write_pre_close(self, token: Token) -> None:
        """Close a preformatted region."""

        _ = token
        self._close_verbatim()

    def write_code_open(self, token: Token) -> None:
        """Open a code region."""

        _ = token
        self._open_verbatim()

    def write_code_close(self, token: Token) -> None:
        """Close a code region."""

        _ = token
        self._close_verbatim()

    def write_table_open(self, token: Token) -> None:
        """Open a table; rows are never wrapped."""

        _ = token
        self._open_verbatim()

    def write_table_close(self, token: Token) -> None:
        """Close a table."""

        _ = token
        self._close_verbatim()

    def write_kdoc_whitespace(self) -> None:
        """Request a hard line break; consecutive requests add empty lines."""

        if self._wrote_anything_significant:
            self._requested_line_breaks += 1

    def request_whitespace(self) -> None:
        """Request a space before the next literal, or a wrap when it does not fit."""

        self._requested_whitespace = True

    def write_literal(self, token: Token) -> None:
        """Write one literal word (or one verbatim code line)."""

        self._write_token(token.text)

    def __str__(self) -> str:
        """Return the text accumulated so far."""

        return "".join(self._output)

    def _open_verbatim(self) -> None:
        """Start a region whose spaces are never turned into wraps."""

        self._request_line_break()
        self._verbatim_depth += 1

    def _close_verbatim(self) -> None:
        """End the innermost verbatim region."""

        self._verbatim_depth = max(0, self._verbatim_depth - 1)
        self._request_line_break()

    def _request_line_break(self) -> None:
        """Make sure the next literal starts a new line."""

        if self._wrote_anything_significant:
            self._requested_line_breaks = max(1, self._requested_line_breaks)

    def _write_token(self, text: str) -> None:
        """Resolve pending requests, then write the token text."""

        if self._requested_line_breaks:
            for _ in range(self._requested_line_breaks):
                self._write_newline()
        elif self._requested_whitespace and not self._at_start_of_line:
            if self._verbatim_depth or self._keep_next_space or self._fits(text):
                self._append(" ")
            else:
                self._write_newline()
        self._requested_line_breaks = 0
        self._requested_whitespace = False
        self._keep_next_space = False

        starts_line = self._at_start_of_line
        if starts_line:
            self._append(" ")
            self._at_start_of_line = False
        self._append(text)
        self._wrote_anything_significant = True
        if self._list_item_pending:
            self._list_item_pending = False
            # A bullet after a link or tag subject is prose and wraps normally.
            self._keep_next_space = starts_line

    def _fits(self, text: str) -> bool:
        """Return whether a space plus `text` fits on the current line."""

        return self._column + 1 + len(text) <= self._max_line_width

    def _write_newline(self) -> None:
        """End the current line and write the next line's continuation marker."""

        self._append("\n")
        self._append(" " * self._block_indent)
        self._append(" *")
        self._at_start_of_line = True

    def _append(self, text: str) -> None:
        """Append text and keep the column in sync."""

        self._output.append(text)
        if text.startswith("\n"):
            self._column = len(text) - 1
        else:
            self._column += len(text)
