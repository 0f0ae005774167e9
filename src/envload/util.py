# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared utilities."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class DictOption(Enum):
    """How :func:`to_env_dict` treats repeated keys."""

    TAKE_FIRST = "first"
    TAKE_LAST = "last"


def to_env_dict(
    pairs: Iterable[tuple[str, str]],
    option: DictOption = DictOption.TAKE_LAST,
) -> dict[str, str]:
    """Collapse ordered *pairs* into a dict.

    Keys keep the position of their first occurrence.  With ``TAKE_LAST`` a
    later value replaces an earlier one; with ``TAKE_FIRST`` it is ignored.
    """
    result: dict[str, str] = {}
    for key, value in pairs:
        if key in result and option is DictOption.TAKE_FIRST:
            continue
        result[key] = value
    return result


def mask(value: str) -> str:
    """Hide all but the ends of *value* for display."""
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


def parse_bool(raw: str | None) -> bool | None:
    """``true``/``false`` (any case, surrounding blanks ignored); ``None`` otherwise."""
    if raw is None:
        return None
    lowered = raw.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None
