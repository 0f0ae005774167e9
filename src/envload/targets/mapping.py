# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""MappingTarget -- an in-memory dict, for embedding and tests."""

from __future__ import annotations

from collections.abc import MutableMapping

from envload.target import EnvTarget


class MappingTarget(EnvTarget):
    """Write variables into a caller-owned mutable mapping."""

    service_name: str = "mapping"
    service_display_name: str = "In-memory mapping"

    def __init__(self, data: MutableMapping[str, str] | None = None) -> None:
        self.data: MutableMapping[str, str] = data if data is not None else {}

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def list_keys(self) -> list[str]:
        return sorted(self.data.keys())
