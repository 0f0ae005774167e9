# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Position-tracking cursor over an immutable text buffer."""

from __future__ import annotations

from collections.abc import Callable

from envload.errors import ParseError


class Scanner:
    """Read-only cursor with one-call lookahead and line/column reporting."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        """Return the character at ``pos + offset``, or ``""`` past the end."""
        i = self.pos + offset
        if i < len(self.text):
            return self.text[i]
        return ""

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.text))

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        end = len(self.text)
        while self.pos < end and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]

    def scan_while(self, predicate: Callable[[str], bool]) -> int:
        """Return the offset of the first character failing *predicate*, without moving."""
        i = self.pos
        while i < len(self.text) and predicate(self.text[i]):
            i += 1
        return i - self.pos

    def location(self, pos: int | None = None) -> tuple[int, int]:
        """1-based ``(line, column)`` of *pos* (default: current position)."""
        if pos is None:
            pos = self.pos
        line = self.text.count("\n", 0, pos) + 1
        column = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        return line, column

    def error(self, expected: str, pos: int | None = None) -> ParseError:
        line, column = self.location(pos)
        return ParseError(expected, line, column)
