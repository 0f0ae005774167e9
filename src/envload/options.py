# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Options for the loading functions in :mod:`envload.sdk`."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from envload.config import EnvloadConfig
from envload.policy import ClobberPolicy
from envload.target import EnvTarget
from envload.targets.process import ProcessTarget


@dataclass(frozen=True)
class LoadOptions:
    """How a .env source is loaded.

    Parameters
    ----------
    set_env_vars : bool, default True
        Write the result into ``target``. When False nothing outside the
        returned dict changes.
    clobber : ClobberPolicy, default CLOBBER
        Duplicate and pre-existing key handling.
    only_exact_path : bool, default True
        When False, look for the file in parent directories too.
    include_env_vars : bool, default True
        Let ``$NAME`` fall back to variables already in ``target``.
    target : EnvTarget, optional
        Where values are written; defaults to the process environment.

    Each ``no_*``/``traverse_path``/``exclude_env_vars`` method returns a
    modified copy, so they chain:

    >>> LoadOptions().no_clobber().traverse_path().only_exact_path
    False
    """

    set_env_vars: bool = True
    clobber: ClobberPolicy = ClobberPolicy.CLOBBER
    only_exact_path: bool = True
    include_env_vars: bool = True
    target: EnvTarget | None = field(default=None, compare=False)

    def no_env_vars(self) -> LoadOptions:
        return replace(self, set_env_vars=False)

    def no_clobber(self, *, return_actual: bool = False) -> LoadOptions:
        policy = ClobberPolicy.NO_CLOBBER_RETURN_ACTUAL if return_actual else ClobberPolicy.NO_CLOBBER
        return replace(self, clobber=policy)

    def traverse_path(self) -> LoadOptions:
        return replace(self, only_exact_path=False)

    def exclude_env_vars(self) -> LoadOptions:
        return replace(self, include_env_vars=False)

    def with_target(self, target: EnvTarget) -> LoadOptions:
        return replace(self, target=target)

    def resolve_target(self) -> EnvTarget:
        return self.target if self.target is not None else ProcessTarget()

    @classmethod
    def from_config(cls, cfg: EnvloadConfig) -> LoadOptions:
        return cls(
            clobber=cfg.clobber,
            only_exact_path=not cfg.traverse,
            include_env_vars=cfg.include_env,
        )
