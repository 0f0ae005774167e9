# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""FileTarget -- read/write variables in a plain .env file.

Used by ``envload merge`` and ``--target file`` (with ``--output``).
"""

from __future__ import annotations

from pathlib import Path

from envload.chars import is_control, is_plain, is_whitespace
from envload.env_file import parse_env_file
from envload.resolve import resolve
from envload.target import EnvTarget

_ESCAPES = {"\\": "\\\\", '"': '\\"', "$": "\\$", "\n": "\\n", "\r": "\\r"}


def format_env_value(value: str) -> str:
    """Format a value for .env: bare when safe, otherwise double-quoted and escaped."""
    if value and all(is_plain(c, "\"'$#\\") for c in value):
        return value
    out: list[str] = []
    for c in value:
        if c in _ESCAPES:
            out.append(_ESCAPES[c])
        elif is_control(c) and not is_whitespace(c):
            # A lone octal byte above 0x7F is not valid UTF-8; C1 controls go out as \u.
            out.append(f"\\{ord(c):03o}" if ord(c) < 0x80 else f"\\u{ord(c):04x}")
        else:
            out.append(c)
    return '"' + "".join(out) + '"'


class FileTarget(EnvTarget):
    """Read/write variables as ``KEY=value`` lines in a single .env file.

    Reading resolves the file on its own (no outside context); writing
    rewrites it sorted by key.
    """

    service_name: str = "file"
    service_display_name: str = "Plain .env file"

    def __init__(self, path: str | Path = ".env") -> None:
        self._path = Path(path)

    @classmethod
    def from_config(cls, path: str | None = None, **kwargs: object) -> FileTarget:
        return cls(path=path or ".env")

    def _read(self) -> dict[str, str]:
        if not self._path.is_file():
            return {}
        return dict(resolve(parse_env_file(self._path)))

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        lines = [f"{k}={format_env_value(v)}" for k, v in sorted(data.items())]
        self._path.write_text("\n".join(lines) + "\n" if lines else "", encoding="utf-8")

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def list_keys(self) -> list[str]:
        return sorted(self._read().keys())

    def snapshot(self) -> dict[str, str]:
        return self._read()
