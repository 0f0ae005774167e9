# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parsed value fragments and assignments.

A value is a tuple of fragments: :class:`Literal` text or an
:class:`Interpolation` of another variable.  Nothing is looked up until the
resolver walks the assignments in document order.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Literal:
    """Text copied into the value as-is."""

    text: str


@dataclass(frozen=True)
class Interpolation:
    """A ``$NAME`` or ``${NAME}`` reference."""

    name: str


ValueFragment = Union[Literal, Interpolation]
ValueExpression = tuple[ValueFragment, ...]


@dataclass(frozen=True)
class Assignment:
    """One ``KEY=value`` line, with the position of the key."""

    key: str
    value: ValueExpression
    line: int = 0
    column: int = 0


def evaluate(value: ValueExpression, context: Mapping[str, str]) -> str:
    """Concatenate *value*, looking interpolations up in *context* (missing -> ``""``)."""
    parts: list[str] = []
    for fragment in value:
        if isinstance(fragment, Literal):
            parts.append(fragment.text)
        elif isinstance(fragment, Interpolation):
            parts.append(context.get(fragment.name, ""))
        else:
            raise TypeError(f"Unknown value fragment: {fragment!r}")
    return "".join(parts)


def merge_literals(fragments: list[ValueFragment]) -> ValueExpression:
    """Join adjacent :class:`Literal` fragments so values stay compact."""
    merged: list[ValueFragment] = []
    for fragment in fragments:
        if isinstance(fragment, Literal):
            if not fragment.text:
                continue
            if merged and isinstance(merged[-1], Literal):
                merged[-1] = Literal(merged[-1].text + fragment.text)
                continue
        merged.append(fragment)
    return tuple(merged)
