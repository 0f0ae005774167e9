"""Tests for EnvTarget implementations and the target registry."""

from __future__ import annotations

import os

import pytest

from envload.env_file import parse_value
from envload.target import EnvTarget
from envload.targets import get_target_class, get_target_entries, list_target_names
from envload.targets.file_target import FileTarget, format_env_value
from envload.targets.mapping import MappingTarget
from envload.targets.process import ProcessTarget
from envload.values import evaluate


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

def test_builtin_targets_listed_first():
    names = [name for name, _ in get_target_entries()]
    assert names[:3] == ["process", "file", "mapping"]


def test_get_target_class():
    assert get_target_class("process") is ProcessTarget
    assert get_target_class("file") is FileTarget
    assert get_target_class("mapping") is MappingTarget


def test_get_target_class_unknown():
    with pytest.raises(KeyError, match="Available targets: .*file"):
        get_target_class("vault")


def test_list_target_names():
    assert {"process", "file", "mapping"} <= set(list_target_names())


def test_targets_have_display_names():
    for name, target_cls in get_target_entries():
        assert issubclass(target_cls, EnvTarget)
        assert target_cls.service_name == name
        assert target_cls.service_display_name


# ---------------------------------------------------------------------------
# format_env_value
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "value, expected",
    [
        ("abc", "abc"),
        ("/usr/local/bin:/bin", "/usr/local/bin:/bin"),
        ("", '""'),
        ("a b", '"a b"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("$HOME", '"\\$HOME"'),
        ("a#b", '"a#b"'),
        ("it's", '"it\'s"'),
        ("c:\\tmp", '"c:\\\\tmp"'),
        ("one\ntwo", '"one\\ntwo"'),
        ("bell\a", '"bell\\007"'),
        ("a\x90b", '"a\\u0090b"'),
    ],
)
def test_format_env_value(value, expected):
    assert format_env_value(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        "a b",
        'x"y$z\\',
        "multi\r\nline",
        "\x00\x1f",
        "caf\u00e9 \U0001F680",
        "a\x90b",
        "\x9f",
        "\x7f\x80\x9f0",
    ],
)
def test_format_env_value_parses_back(value):
    assert evaluate(parse_value(format_env_value(value)), {}) == value


# ---------------------------------------------------------------------------
# FileTarget
# ---------------------------------------------------------------------------

def test_file_target_roundtrip(tmp_path):
    path = tmp_path / "out" / ".env"
    target = FileTarget(path)
    assert target.list_keys() == []
    target.set("B", "two words")
    target.set("A", "$literal")
    assert path.read_text() == 'A="\\$literal"\nB="two words"\n'
    assert FileTarget(path).get("A") == "$literal"
    assert target.snapshot() == {"A": "$literal", "B": "two words"}


def test_file_target_keeps_c1_controls_readable(tmp_path):
    path = tmp_path / "o.env"
    target = FileTarget(path)
    target.set("A", "a\x90b")
    target.set("B", "\x9f")
    assert path.read_text() == 'A="a\\u0090b"\nB="\\u009f"\n'
    assert FileTarget(path).snapshot() == {"A": "a\x90b", "B": "\x9f"}


def test_file_target_reads_interpolated_values(tmp_path):
    path = tmp_path / ".env"
    path.write_text("A=1\nB=${A}2\n")
    assert FileTarget(path).get("B") == "12"


def test_file_target_from_config(tmp_path):
    target = FileTarget.from_config(path=str(tmp_path / "x.env"))
    target.set("K", "v")
    assert (tmp_path / "x.env").read_text() == "K=v\n"


# ---------------------------------------------------------------------------
# ProcessTarget / MappingTarget
# ---------------------------------------------------------------------------

def test_process_target(monkeypatch):
    target = ProcessTarget()
    monkeypatch.setenv("ELT_A", "")
    assert target.get("ELT_A") == ""
    target.set("ELT_B", "x")
    assert os.environ["ELT_B"] == "x"
    assert target.snapshot()["ELT_B"] == "x"


def test_mapping_target_uses_caller_dict():
    data = {"B": "2"}
    target = MappingTarget(data)
    target.set("A", "1")
    assert data == {"B": "2", "A": "1"}
    assert target.list_keys() == ["A", "B"]
    assert target.snapshot() == {"A": "1", "B": "2"}


def test_from_config_default_ignores_path():
    assert isinstance(MappingTarget.from_config(path="ignored"), MappingTarget)
