# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse .env text into assignments.

Handles:
  - blank lines and ``#`` comments
  - ``export KEY=VALUE`` (also ``set``, ``set -x``, ``SET``) prefix
  - unquoted values with ``$VAR`` / ``${VAR}`` and inline comments
  - single-quoted values, taken literally (no escapes, no interpolation)
  - double-quoted values with escapes, byte sequences and interpolation
  - ``\\r\\n``, ``\\n`` or end of input as line terminator

The parser is strict: the first line that does not fit the grammar raises
:class:`~envload.errors.ParseError` and nothing is returned.  Values are left
unevaluated; see :mod:`envload.resolve`.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from envload.chars import (
    is_identifier_char,
    is_identifier_start,
    is_inline_whitespace,
    is_plain,
    is_quoted_text,
)
from envload.errors import ParseError
from envload.escapes import read_escape
from envload.scanner import Scanner
from envload.values import Assignment, Interpolation, Literal, ValueExpression, ValueFragment, merge_literals

EXPORT_PREFIXES = ("export", "set -x", "set", "SET")

# Characters that end a run of plain text inside each kind of value.
_UNQUOTED_STOP = "$\"'"
_DOUBLE_QUOTED_STOP = '"\\$'


class _Parser:
    def __init__(self, text: str) -> None:
        self.scanner = Scanner(text)

    # -- lines ---------------------------------------------------------------

    def assignments(self) -> Iterator[Assignment]:
        while not self.scanner.at_end:
            assignment = self.line()
            if assignment is not None:
                yield assignment

    def line(self) -> Assignment | None:
        """Parse one line; ``None`` for blank and comment-only lines."""
        s = self.scanner
        self.inline_whitespace()
        if s.peek() == "#":
            self.comment()
            self.line_terminator()
            return None
        if s.at_end or s.peek() in "\r\n":
            self.line_terminator()
            return None

        self.export_prefix()
        line, column = s.location()
        key = self.identifier()
        self.inline_whitespace()
        if s.peek() != "=":
            raise s.error("'='")
        s.advance()
        self.inline_whitespace()
        value = self.value()
        self.inline_whitespace()
        if s.peek() == "#":
            self.comment()
        self.line_terminator()
        return Assignment(key, value, line, column)

    def inline_whitespace(self) -> str:
        return self.scanner.take_while(is_inline_whitespace)

    def export_prefix(self) -> None:
        s = self.scanner
        for prefix in EXPORT_PREFIXES:
            if s.startswith(prefix) and is_inline_whitespace(s.peek(len(prefix))):
                s.advance(len(prefix))
                self.inline_whitespace()
                return

    def identifier(self) -> str:
        s = self.scanner
        if not is_identifier_start(s.peek()):
            raise s.error("identifier")
        return s.take_while(is_identifier_char)

    def comment(self) -> str:
        s = self.scanner
        s.advance()  # '#'
        return s.take_while(lambda c: c not in "\r\n")

    def line_terminator(self) -> None:
        s = self.scanner
        if s.startswith("\r\n"):
            s.advance(2)
        elif s.peek() == "\n":
            s.advance()
        elif not s.at_end:
            raise s.error("end of line")

    # -- values --------------------------------------------------------------

    def value(self) -> ValueExpression:
        first = self.scanner.peek()
        if first == "'":
            return self.single_quoted()
        if first == '"':
            return self.double_quoted()
        return self.unquoted()

    def unquoted(self) -> ValueExpression:
        s = self.scanner
        fragments: list[ValueFragment] = []
        if s.peek() == "#":
            return ()
        while True:
            c = s.peek()
            if c == "$":
                fragments.append(self.dollar())
            elif is_plain(c, _UNQUOTED_STOP):
                fragments.append(Literal(s.take_while(lambda ch: is_plain(ch, _UNQUOTED_STOP))))
            elif is_inline_whitespace(c):
                # Keep inner whitespace only; trailing blanks and " #comment" end the value.
                width = s.scan_while(is_inline_whitespace)
                following = s.peek(width)
                if following == "#" or not (following == "$" or is_plain(following, _UNQUOTED_STOP)):
                    break
                fragments.append(Literal(s.text[s.pos:s.pos + width]))
                s.advance(width)
            else:
                break
        return merge_literals(fragments)

    def single_quoted(self) -> ValueExpression:
        s = self.scanner
        s.advance()  # opening quote
        text = s.take_while(lambda c: is_quoted_text(c, "'"))
        if s.peek() != "'":
            raise s.error("closing single quote")
        s.advance()
        return merge_literals([Literal(text)])

    def double_quoted(self) -> ValueExpression:
        s = self.scanner
        s.advance()  # opening quote
        fragments: list[ValueFragment] = []
        while True:
            c = s.peek()
            if c == '"':
                s.advance()
                return merge_literals(fragments)
            if c == "$":
                fragments.append(self.dollar())
            elif c == "\\":
                fragments.append(Literal(read_escape(s)))
            elif is_quoted_text(c, _DOUBLE_QUOTED_STOP):
                fragments.append(Literal(s.take_while(lambda ch: is_quoted_text(ch, _DOUBLE_QUOTED_STOP))))
            else:
                raise s.error("closing double quote")

    def dollar(self) -> ValueFragment:
        """``$NAME``, ``${NAME}``, or a literal ``$`` when neither follows."""
        s = self.scanner
        s.advance()  # '$'
        if is_identifier_start(s.peek()):
            return Interpolation(self.identifier())
        if s.peek() == "{" and is_identifier_start(s.peek(1)):
            mark = s.pos
            s.advance()
            name = self.identifier()
            if s.peek() == "}":
                s.advance()
                return Interpolation(name)
            s.pos = mark
        return Literal("$")


def parse_env_text(text: str) -> Iterator[Assignment]:
    """Yield the assignments in *text* in document order.

    Lazy: a :class:`ParseError` surfaces while iterating, at the first line
    that does not parse.  Empty text yields nothing.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    return _Parser(text).assignments()


def parse_env_file(path: str | Path, encoding: str = "utf-8") -> list[Assignment]:
    """Read and parse a .env file; errors name the file."""
    text = Path(path).read_text(encoding=encoding)
    try:
        return list(parse_env_text(text))
    except ParseError as e:
        raise e.with_source(str(path)) from None


def parse_value(text: str) -> ValueExpression:
    """Parse *text* as a single value (quoted or not); the whole text must be consumed."""
    parser = _Parser(text)
    value = parser.value()
    if not parser.scanner.at_end:
        raise parser.scanner.error("end of value")
    return value


def is_valid_identifier(name: str) -> bool:
    """True when *name* is usable as a key or in ``$NAME``."""
    if not name or not is_identifier_start(name[0]):
        return False
    return all(is_identifier_char(c) for c in name)
