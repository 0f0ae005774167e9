# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Which values win when a key is defined twice or already exists.

Two stages, kept apart:

* :func:`collapse` is pure: it turns the resolved pairs into the mapping to
  return and the mapping to propagate.
* :func:`apply` writes the propagated mapping into an
  :class:`~envload.target.EnvTarget`; it is the only step with side effects.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from envload.util import DictOption, to_env_dict

if TYPE_CHECKING:
    from envload.target import EnvTarget

logger = logging.getLogger(__name__)


class ClobberPolicy(str, Enum):
    """Duplicate and pre-existing key handling."""

    CLOBBER = "clobber"
    NO_CLOBBER = "no-clobber"
    NO_CLOBBER_RETURN_ACTUAL = "no-clobber-return-actual"

    @property
    def clobbers(self) -> bool:
        return self is ClobberPolicy.CLOBBER

    @property
    def dict_option(self) -> DictOption:
        return DictOption.TAKE_LAST if self.clobbers else DictOption.TAKE_FIRST

    @classmethod
    def from_name(cls, name: str) -> ClobberPolicy:
        """Look a policy up by value, accepting ``_`` for ``-`` and any case."""
        normalized = name.strip().lower().replace("_", "-")
        for policy in cls:
            if policy.value == normalized:
                return policy
        choices = ", ".join(p.value for p in cls)
        raise ValueError(f"Unknown clobber policy {name!r}. Expected one of: {choices}")


@dataclass
class MergeResult:
    """``values`` is what a load returns; ``to_propagate`` is what it may write out."""

    values: dict[str, str] = field(default_factory=dict)
    to_propagate: dict[str, str] = field(default_factory=dict)
    policy: ClobberPolicy = ClobberPolicy.CLOBBER


def collapse(
    pairs: Iterable[tuple[str, str]],
    policy: ClobberPolicy = ClobberPolicy.CLOBBER,
    existing: Mapping[str, str] | None = None,
) -> MergeResult:
    """Collapse resolved *pairs* (document order, duplicates allowed).

    ``CLOBBER`` keeps the last occurrence and propagates everything.  The
    no-clobber policies keep the first occurrence and never propagate a key
    already in *existing*; ``NO_CLOBBER_RETURN_ACTUAL`` also reports the
    existing value instead of the file's.
    """
    existing = existing or {}
    values = to_env_dict(pairs, policy.dict_option)
    if policy.clobbers:
        return MergeResult(values=values, to_propagate=dict(values), policy=policy)

    to_propagate = {k: v for k, v in values.items() if k not in existing}
    if policy is ClobberPolicy.NO_CLOBBER_RETURN_ACTUAL:
        values = {k: existing.get(k, v) for k, v in values.items()}
    return MergeResult(values=values, to_propagate=to_propagate, policy=policy)


def apply(result: MergeResult, target: EnvTarget) -> int:
    """Write ``result.to_propagate`` into *target*; return the number of keys written.

    Under a no-clobber policy a key the target already holds is skipped, so a
    target that changed since the snapshot was taken is still respected.
    """
    written = 0
    for key, value in result.to_propagate.items():
        if not result.policy.clobbers and target.get(key) is not None:
            logger.debug("Not overwriting existing %s in %s", key, target.service_name)
            continue
        target.set(key, value)
        written += 1
    logger.debug("Wrote %d variable(s) to %s", written, target.service_name)
    return written
