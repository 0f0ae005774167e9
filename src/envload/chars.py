# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Character classes used by the dotenv grammar.

Every predicate takes a single character and returns ``False`` for the empty
string, which is what :meth:`envload.scanner.Scanner.peek` returns at end of
input.
"""

from __future__ import annotations

import unicodedata

INLINE_WHITESPACE = " \t"
OCTAL_DIGITS = "01234567"
HEX_DIGITS = "0123456789abcdefABCDEF"

_WHITESPACE_CATEGORIES = ("Zs", "Zl", "Zp")
_CONTROL_WHITESPACE = "\t\n\v\f\r\x85"


def is_letter(c: str) -> bool:
    return len(c) == 1 and ("a" <= c <= "z" or "A" <= c <= "Z")


def is_digit(c: str) -> bool:
    return len(c) == 1 and "0" <= c <= "9"


def is_octal_digit(c: str) -> bool:
    return len(c) == 1 and c in OCTAL_DIGITS


def is_hex_digit(c: str) -> bool:
    return len(c) == 1 and c in HEX_DIGITS


def is_identifier_start(c: str) -> bool:
    return is_letter(c) or c == "_"


def is_identifier_char(c: str) -> bool:
    """Letters, digits, ``_`` and the two extras ``.`` and ``-``."""
    return is_letter(c) or is_digit(c) or (len(c) == 1 and c in "_.-")


def is_inline_whitespace(c: str) -> bool:
    return len(c) == 1 and c in INLINE_WHITESPACE


def is_whitespace(c: str) -> bool:
    if len(c) != 1:
        return False
    return c in _CONTROL_WHITESPACE or unicodedata.category(c) in _WHITESPACE_CATEGORIES


def is_control(c: str) -> bool:
    return len(c) == 1 and unicodedata.category(c) == "Cc"


def is_plain(c: str, excluded: str = "") -> bool:
    """True for a character that is neither control, whitespace, nor in *excluded*."""
    if len(c) != 1:
        return False
    return not is_control(c) and not is_whitespace(c) and c not in excluded


def is_quoted_text(c: str, excluded: str = "") -> bool:
    """Characters allowed inside quotes: whitespace (newlines too) or non-control."""
    if len(c) != 1 or c in excluded:
        return False
    return is_whitespace(c) or not is_control(c)
