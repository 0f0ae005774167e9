# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exceptions raised while parsing .env text."""

from __future__ import annotations


class ParseError(ValueError):
    """No grammar alternative matched at ``line``/``column`` (both 1-based)."""

    def __init__(
        self,
        expected: str,
        line: int,
        column: int,
        source: str | None = None,
    ) -> None:
        self.expected = expected
        self.line = line
        self.column = column
        self.source = source
        super().__init__(expected, line, column, source)

    def __str__(self) -> str:
        where = f"{self.line}:{self.column}"
        if self.source:
            where = f"{self.source}:{where}"
        return f"{where}: expected {self.expected}"

    def with_source(self, source: str) -> ParseError:
        """Return a copy of this error that names the file it came from."""
        return ParseError(self.expected, self.line, self.column, source=source)
