# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Abstract base class for targets that resolved variables are written into."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class EnvTarget(ABC):
    """Destination for resolved variables (process environment, dict, file ...).

    Targets only receive values; parsing and resolving never touch them.  The
    merge stage (:func:`envload.policy.apply`) calls :meth:`get` to decide
    whether a key already exists and :meth:`set` to write it.

    **Target listing** (for ``envload targets``): each target defines
    ``service_name`` (short name used by ``--target`` and the
    ``envload.targets`` entry-point group) and ``service_display_name``.

    **Configuration API**: targets can override :meth:`from_config` when they
    need settings (e.g. a path) to be instantiated.
    """

    service_name: ClassVar[str] = ""
    service_display_name: ClassVar[str] = ""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value for *key*, or ``None`` if it is not set."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Create or overwrite *key* with *value*."""

    @abstractmethod
    def list_keys(self) -> list[str]:
        """Return all key names held by this target."""

    def snapshot(self) -> dict[str, str]:
        """Copy of the current contents, used as the "already set" oracle."""
        result: dict[str, str] = {}
        for key in self.list_keys():
            value = self.get(key)
            if value is not None:
                result[key] = value
        return result

    @classmethod
    def from_config(cls, path: str | None = None, **kwargs: object) -> EnvTarget:
        """Create a target from CLI/config settings; the default ignores *path*."""
        return cls(**kwargs)
