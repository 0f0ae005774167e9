# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""ProcessTarget -- the current process environment (``os.environ``)."""

from __future__ import annotations

import os

from envload.target import EnvTarget


class ProcessTarget(EnvTarget):
    """Write variables into ``os.environ``.

    Python keeps an empty string distinct from an unset variable, so a key set
    to ``""`` counts as existing for no-clobber loads.
    """

    service_name: str = "process"
    service_display_name: str = "Current process environment (os.environ)"

    def get(self, key: str) -> str | None:
        return os.environ.get(key)

    def set(self, key: str, value: str) -> None:
        os.environ[key] = value

    def list_keys(self) -> list[str]:
        return sorted(os.environ.keys())

    def snapshot(self) -> dict[str, str]:
        return dict(os.environ)
