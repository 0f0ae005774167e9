# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Evaluate parsed assignments in document order.

Each value sees the variables resolved before it (plus the optional seed
context) and nothing after it: ``A=$B`` followed by ``B=2`` gives ``A=""``.
An undefined name is simply empty.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from envload.env_file import parse_env_text
from envload.policy import ClobberPolicy
from envload.values import Assignment, evaluate


def resolve(
    assignments: Iterable[Assignment],
    context: Mapping[str, str] | None = None,
    policy: ClobberPolicy = ClobberPolicy.CLOBBER,
) -> list[tuple[str, str]]:
    """Return ``(key, value)`` for every assignment, duplicates included.

    *context* seeds interpolation and is copied, never modified.  After each
    assignment its value is recorded for later lookups; under a no-clobber
    policy an already known key keeps its first value.
    """
    scope: dict[str, str] = dict(context or {})
    resolved: list[tuple[str, str]] = []
    for assignment in assignments:
        value = evaluate(assignment.value, scope)
        if policy.clobbers or assignment.key not in scope:
            scope[assignment.key] = value
        resolved.append((assignment.key, value))
    return resolved


def parse(
    text: str,
    context: Mapping[str, str] | None = None,
    policy: ClobberPolicy = ClobberPolicy.CLOBBER,
) -> list[tuple[str, str]]:
    """Parse and resolve *text* in one pass; raises :class:`~envload.errors.ParseError`."""
    return resolve(parse_env_text(text), context, policy)
