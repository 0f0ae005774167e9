# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Backslash escapes inside double-quoted values.

Handles:
  - single-character escapes (``\\n``, ``\\t``, ``\\"``, ``\\$`` ...)
  - octal bytes ``\\101``; consecutive octal escapes decode together as UTF-8
  - hex bytes ``\\xE2\\x98\\xA0``; the lead byte decides how many follow
  - UTF-16 code units ``\\u00ae`` / ``\\uae``; consecutive units may form a pair
  - UTF-32 code points ``\\U0001F680`` / ``\\U1F680``
  - anything else (``\\m``) is kept verbatim, backslash included
"""

from __future__ import annotations

from envload.chars import is_hex_digit, is_octal_digit
from envload.scanner import Scanner

SIMPLE_ESCAPES: dict[str, str] = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
    "?": "?",
    "$": "$",
    "`": "`",
}


def utf8_sequence_length(lead: int) -> int:
    """Number of bytes in a UTF-8 sequence that starts with *lead*."""
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


def read_escape(scanner: Scanner) -> str:
    """Consume one escape (or one run of byte escapes) at a backslash and decode it."""
    marker = scanner.peek(1)
    if marker == "U":
        return _read_utf32(scanner)
    if marker == "u":
        return _read_utf16(scanner)
    if marker == "x":
        return _read_utf8(scanner)
    if is_octal_digit(marker):
        return _read_octal(scanner)
    if not marker:
        raise scanner.error("escaped character", scanner.pos + 1)
    scanner.advance(2)
    return SIMPLE_ESCAPES.get(marker, "\\" + marker)


def _read_digits(scanner: Scanner, *, octal: bool, least: int, most: int) -> str:
    check = is_octal_digit if octal else is_hex_digit
    count = min(scanner.scan_while(check), most)
    if count < least:
        kind = "octal" if octal else "hex"
        raise scanner.error(f"{least} to {most} {kind} digits")
    digits = scanner.text[scanner.pos:scanner.pos + count]
    scanner.advance(count)
    return digits


def _decode(scanner: Scanner, data: bytes, encoding: str, start: int) -> str:
    try:
        return data.decode(encoding)
    except UnicodeDecodeError:
        raise scanner.error(f"valid {encoding.upper()} escape sequence", start) from None


def _read_hex_byte(scanner: Scanner) -> int:
    scanner.advance(2)  # \x
    return int(_read_digits(scanner, octal=False, least=1, most=2), 16)


def _read_utf8(scanner: Scanner) -> str:
    start = scanner.pos
    lead = _read_hex_byte(scanner)
    data = bytearray([lead])
    length = utf8_sequence_length(lead)
    while len(data) < length:
        if not scanner.startswith("\\x"):
            raise scanner.error(f"\\x escape continuing a {length}-byte UTF-8 sequence")
        data.append(_read_hex_byte(scanner))
    return _decode(scanner, bytes(data), "utf-8", start)


def _read_octal(scanner: Scanner) -> str:
    start = scanner.pos
    data = bytearray()
    while scanner.peek() == "\\" and is_octal_digit(scanner.peek(1)):
        byte_start = scanner.pos
        scanner.advance(1)
        value = int(_read_digits(scanner, octal=True, least=1, most=3), 8)
        if value > 0xFF:
            raise scanner.error("octal escape between \\0 and \\377", byte_start)
        data.append(value)
    return _decode(scanner, bytes(data), "utf-8", start)


def _read_utf16(scanner: Scanner) -> str:
    start = scanner.pos
    data = bytearray()
    while scanner.startswith("\\u"):
        scanner.advance(2)
        unit = int(_read_digits(scanner, octal=False, least=2, most=4), 16)
        data += unit.to_bytes(2, "little")
    return _decode(scanner, bytes(data), "utf-16-le", start)


def _read_utf32(scanner: Scanner) -> str:
    start = scanner.pos
    scanner.advance(2)  # \U
    code = int(_read_digits(scanner, octal=False, least=2, most=8), 16)
    return _decode(scanner, code.to_bytes(4, "little"), "utf-32-le", start)
