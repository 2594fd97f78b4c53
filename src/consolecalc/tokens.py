"""Whitespace separated token reading from a line oriented text stream."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from consolecalc.exceptions import EndOfInputError
from consolecalc.validators import parse_number

if TYPE_CHECKING:
    from typing import TextIO


class TokenReader:
    """
    Reads tokens one at a time, keeping the rest of the current line buffered.

    Tokens may span several lines: asking for a token when the current line
    is used up pulls in the next non-blank line. ``discard_line`` drops
    whatever is left of the current line, which is how the console recovers
    from bad input.

    Example:
        >>> import io
        >>> reader = TokenReader(io.StringIO("10 + 5\\n="))
        >>> [reader.next_token() for _ in range(4)]
        ['10', '+', '5', '=']
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def _read_raw_line(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EndOfInputError()
        return line.rstrip("\r\n")

    def next_token(self) -> str:
        """Return the next token, reading further lines as needed."""
        while not self._pending:
            self._pending.extend(self._read_raw_line().split())
        return self._pending.popleft()

    def next_number(self) -> float:
        """Return the next token converted to a finite float."""
        return parse_number(self.next_token())

    def read_line(self, max_length: int | None = None) -> str:
        """
        Return the rest of the current line, or the next line if none is buffered.

        Only meaningful before any token of the line has been consumed, which
        is how the console uses it for the calculator name.
        """
        if self._pending:
            line = " ".join(self._pending)
            self._pending.clear()
        else:
            line = self._read_raw_line()

        if max_length is not None:
            line = line[:max_length]
        return line

    def discard_line(self) -> None:
        """Drop the unread remainder of the current line."""
        self._pending.clear()

