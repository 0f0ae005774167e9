# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Target plugin registry -- discovers targets via the ``envload.targets`` entry-point group."""

from __future__ import annotations

from collections.abc import Iterator
from importlib.metadata import entry_points

from envload.target import EnvTarget
from envload.targets.file_target import FileTarget
from envload.targets.mapping import MappingTarget
from envload.targets.process import ProcessTarget

_BUILTIN: dict[str, type[EnvTarget]] = {
    ProcessTarget.service_name: ProcessTarget,
    FileTarget.service_name: FileTarget,
    MappingTarget.service_name: MappingTarget,
}


def get_target_entries() -> Iterator[tuple[str, type[EnvTarget]]]:
    """Yield (name, target_class) in display order for ``envload targets``.

    Order: built-in targets, then any other registered targets alphabetically.
    """
    yield from _BUILTIN.items()
    for name in list_target_names():
        if name not in _BUILTIN:
            yield name, get_target_class(name)


def get_target_class(name: str) -> type[EnvTarget]:
    """Return a target class by name, built-in or registered as an entry point.

    Raises ``KeyError`` with a helpful message when the name is unknown.
    """
    if name in _BUILTIN:
        return _BUILTIN[name]
    eps = entry_points(group="envload.targets")
    for ep in eps:
        if ep.name == name:
            return ep.load()

    available = sorted(set(_BUILTIN) | {ep.name for ep in eps})
    raise KeyError(
        f"Unknown target {name!r}. Available targets: {', '.join(available)}"
    )


def list_target_names() -> list[str]:
    """Return sorted names of all targets, built-in and registered."""
    eps = entry_points(group="envload.targets")
    return sorted(set(_BUILTIN) | {ep.name for ep in eps})
