"""Whitespace-token reading and text formatting shared by the save formats and the console."""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass, field
from typing import TextIO


class TokenReader:
    """Reads whitespace-separated tokens, quoted strings and lines from text or a stream."""

    def __init__(self, source: str | TextIO) -> None:
        self._stream: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self._buffer = ""
        self._pos = 0

    def _fill(self) -> bool:
        if self._pos < len(self._buffer):
            return True
        line = self._stream.readline()
        if not line:
            return False
        self._buffer = line
        self._pos = 0
        return True

    def _peek(self) -> str:
        return self._buffer[self._pos] if self._fill() else ""

    def _advance(self) -> str:
        ch = self._peek()
        if ch:
            self._pos += 1
        return ch

    def _skip_whitespace(self) -> None:
        while (ch := self._peek()) and ch.isspace():
            self._pos += 1

    def next_token(self) -> str:
        """Return the next run of non-whitespace characters."""
        self._skip_whitespace()
        if not self._peek():
            raise EOFError("unexpected end of input")
        chars = []
        while (ch := self._peek()) and not ch.isspace():
            chars.append(ch)
            self._pos += 1
        return "".join(chars)

    def next_quoted(self) -> str:
        """Return a double-quoted string with backslash escapes, or a bare token."""
        self._skip_whitespace()
        ch = self._peek()
        if not ch:
            raise EOFError("unexpected end of input")
        if ch != '"':
            return self.next_token()
        self._advance()
        chars = []
        while True:
            ch = self._advance()
            if not ch:
                raise EOFError("unterminated quoted string")
            if ch == "\\":
                escaped = self._advance()
                if not escaped:
                    raise EOFError("unterminated quoted string")
                chars.append(escaped)
            elif ch == '"':
                return "".join(chars)
            else:
                chars.append(ch)

    def next_char(self) -> str:
        """Return the next non-whitespace character."""
        self._skip_whitespace()
        ch = self._advance()
        if not ch:
            raise EOFError("unexpected end of input")
        return ch

    def next_int(self) -> int:
        token = self.next_token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def next_float(self) -> float:
        token = self.next_token()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def read_line(self) -> str:
        """Return the rest of the current line, or the next line, without its line ending."""
        if self._pos < len(self._buffer):
            rest = self._buffer[self._pos:]
            self._pos = len(self._buffer)
        else:
            rest = self._stream.readline()
            if not rest:
                raise EOFError("unexpected end of input")
            self._buffer = rest
            self._pos = len(rest)
        return rest.rstrip("\r\n")


@dataclass
class Console:
    """The player's input and the game's output."""

    reader: TokenReader = field(default_factory=lambda: TokenReader(sys.stdin))
    out: TextIO = field(default_factory=lambda: sys.stdout)

    def say(self, text: str) -> None:
        self.out.write(f"{text}\n")
        self.out.flush()


def quote(text: str) -> str:
    """Wrap text in double quotes, escaping quotes and backslashes."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_number(value: int | float) -> str:
    """Format a number the way a default-precision text stream does."""
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"