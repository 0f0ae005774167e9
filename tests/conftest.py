"""Shared fixtures for envload tests."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_ENV = """\
# Sample .env for tests
export APP_NAME=envload
GREETING="hello world"
HOME_DIR=/home/test
DATA_DIR=${HOME_DIR}/data   # trailing comment
RAW='no $expansion here'
EMPTY=
"""

# Keys the SDK/CLI tests may write into os.environ.
TEST_KEYS = ("APP_NAME", "GREETING", "HOME_DIR", "DATA_DIR", "RAW", "EMPTY", "ELT_A", "ELT_B", "ELT_C")


@pytest.fixture
def sample_env(tmp_path: Path) -> Path:
    """Write a sample .env file and return its path."""
    p = tmp_path / ".env"
    p.write_text(SAMPLE_ENV)
    return p


@pytest.fixture
def write_env(tmp_path: Path):
    """Return a helper that writes *text* to tmp_path/*name*."""

    def _write(name: str, text: str) -> Path:
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text)
        return p

    return _write


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ENVLOAD_* settings and test keys out of os.environ, restoring them afterwards."""
    for key in ("ENVLOAD_PATH", "ENVLOAD_CLOBBER", "ENVLOAD_LOG_LEVEL", *TEST_KEYS):
        # setenv first so monkeypatch records the original state and undoes later writes.
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
