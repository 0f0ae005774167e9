"""Tests for sequential resolution (envload.resolve, envload.values)."""

from __future__ import annotations

import pytest

from envload.policy import ClobberPolicy
from envload.resolve import parse, resolve
from envload.env_file import parse_env_text
from envload.values import Interpolation, Literal, evaluate, merge_literals


def test_parse_resolves_in_order():
    assert parse("A=1\nB=$A\nC=${A}-$B") == [("A", "1"), ("B", "1"), ("C", "1-1")]


def test_forward_reference_is_empty():
    assert parse("A=$B\nB=2") == [("A", ""), ("B", "2")]


def test_undefined_name_is_empty():
    assert parse('A="x${NOPE}y"') == [("A", "xy")]


def test_single_quotes_are_not_interpolated():
    assert parse("A=1\nB='$A'") == [("A", "1"), ("B", "$A")]


def test_context_seeds_lookups():
    assert parse("P=$PATH:/opt/bin", {"PATH": "/bin"}) == [("P", "/bin:/opt/bin")]


def test_context_is_not_modified():
    ctx = {"X": "1"}
    parse("Y=2\nX=3\nZ=$X", ctx)
    assert ctx == {"X": "1"}


def test_duplicates_are_returned():
    assert parse("A=1\nA=2") == [("A", "1"), ("A", "2")]


def test_clobber_later_value_wins_for_lookups():
    assert parse("A=1\nA=2\nB=$A") == [("A", "1"), ("A", "2"), ("B", "2")]


def test_no_clobber_first_value_wins_for_lookups():
    pairs = parse("A=1\nA=2\nB=$A", policy=ClobberPolicy.NO_CLOBBER)
    assert pairs == [("A", "1"), ("A", "2"), ("B", "1")]


def test_no_clobber_prefers_context():
    assert parse("A=2\nB=$A", {"A": "1"}, ClobberPolicy.NO_CLOBBER)[-1] == ("B", "1")
    assert parse("A=2\nB=$A", {"A": "1"}, ClobberPolicy.CLOBBER)[-1] == ("B", "2")


def test_resolve_accepts_assignments():
    assert resolve(parse_env_text("A=a\nB=${A}b")) == [("A", "a"), ("B", "ab")]


def test_evaluate():
    value = (Literal("x="), Interpolation("X"), Literal("!"))
    assert evaluate(value, {"X": "1"}) == "x=1!"
    assert evaluate(value, {}) == "x=!"
    assert evaluate((), {}) == ""


def test_evaluate_rejects_unknown_fragment():
    with pytest.raises(TypeError):
        evaluate(("raw",), {})


def test_merge_literals():
    merged = merge_literals([Literal("a"), Literal(""), Literal("b"), Interpolation("X"), Literal("c")])
    assert merged == (Literal("ab"), Interpolation("X"), Literal("c"))
    assert merge_literals([Literal("")]) == ()
