# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

""".envload.toml configuration loading.

Searches upward from cwd for ``.envload.toml`` and merges with
``ENVLOAD_*`` environment variables and CLI flags.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from envload.policy import ClobberPolicy

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILENAME = ".envload.toml"


@dataclass
class EnvloadConfig:
    """Resolved configuration for the current invocation."""

    path: str = ".env"
    traverse: bool = False
    clobber: ClobberPolicy = ClobberPolicy.CLOBBER
    include_env: bool = True
    config_path: Path | None = None

    def with_environ(self, environ: Mapping[str, str] | None = None) -> EnvloadConfig:
        """Overlay ``ENVLOAD_PATH`` and ``ENVLOAD_CLOBBER``."""
        env = os.environ if environ is None else environ
        cfg = self
        if env.get("ENVLOAD_PATH"):
            cfg = replace(cfg, path=env["ENVLOAD_PATH"])
        if env.get("ENVLOAD_CLOBBER"):
            cfg = replace(cfg, clobber=ClobberPolicy.from_name(env["ENVLOAD_CLOBBER"]))
        return cfg


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.envload.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def _bool_setting(section: dict[str, Any], name: str, default: bool) -> bool:
    value = section.get(name, default)
    if not isinstance(value, bool):
        raise ValueError(f"envload.{name} must be true or false, got {value!r}")
    return value


def _str_setting(section: dict[str, Any], name: str, default: str) -> str:
    value = section.get(name, default)
    if not isinstance(value, str):
        raise ValueError(f"envload.{name} must be a string, got {value!r}")
    return value


def load_config(path: Path | None = None) -> EnvloadConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return EnvloadConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text())
    section = raw.get("envload", {})
    if not isinstance(section, dict):
        raise ValueError(f"[envload] must be a table, got {section!r}")

    return EnvloadConfig(
        path=_str_setting(section, "path", ".env"),
        traverse=_bool_setting(section, "traverse", False),
        clobber=ClobberPolicy.from_name(_str_setting(section, "clobber", ClobberPolicy.CLOBBER.value)),
        include_env=_bool_setting(section, "include_env", True),
        config_path=path,
    )
