"""Tests for envload.util and envload.chars."""

from __future__ import annotations

import pytest

from envload import chars
from envload.util import DictOption, mask, parse_bool, to_env_dict

PAIRS = [("A", "1"), ("B", "2"), ("A", "3")]


def test_to_env_dict_take_last():
    result = to_env_dict(PAIRS, DictOption.TAKE_LAST)
    assert list(result.items()) == [("A", "3"), ("B", "2")]


def test_to_env_dict_take_first():
    assert to_env_dict(PAIRS, DictOption.TAKE_FIRST) == {"A": "1", "B": "2"}


@pytest.mark.parametrize(
    "value, expected",
    [("", "****"), ("secret", "****"), ("supersecret", "sup****ret")],
)
def test_mask(value, expected):
    assert mask(value) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("TRUE", True), (" False ", False), ("1", None), ("yes", None), ("", None), (None, None)],
)
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected


def test_char_predicates_reject_end_of_input():
    for pred in (
        chars.is_letter,
        chars.is_digit,
        chars.is_octal_digit,
        chars.is_hex_digit,
        chars.is_identifier_start,
        chars.is_identifier_char,
        chars.is_inline_whitespace,
        chars.is_whitespace,
        chars.is_control,
        chars.is_plain,
        chars.is_quoted_text,
    ):
        assert pred("") is False


def test_char_classes():
    assert chars.is_whitespace("\u00a0")
    assert chars.is_whitespace("\u2028")
    assert not chars.is_whitespace("\x00")
    assert chars.is_control("\x00") and chars.is_control("\n")
    assert chars.is_plain("é")
    assert not chars.is_plain(" ")
    assert not chars.is_plain("$", "$")
    assert chars.is_quoted_text("\n")
    assert not chars.is_quoted_text("\x01")
    assert not chars.is_letter("é")
