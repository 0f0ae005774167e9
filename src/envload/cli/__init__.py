# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Envload CLI -- inspect, check and export .env files.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``file_arguments``,
``_load_values`` etc.) live here so every command module can import them.
"""

from __future__ import annotations

import functools
import os
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path
from typing import Any

import click
from click.core import ParameterSource
from rich.console import Console

from envload import __version__
from envload.config import load_config
from envload.errors import ParseError
from envload.logging_config import setup_logging
from envload.options import LoadOptions
from envload.policy import ClobberPolicy
from envload.sdk import find_env_file, load_multi
from envload.target import EnvTarget
from envload.targets import get_target_class, get_target_entries
from envload.util import mask

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

console = Console(stderr=True)

_CLOBBER_CHOICES = [p.value for p in ClobberPolicy]


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _resolve_files(ctx: click.Context, files: tuple[str, ...]) -> list[Path]:
    """Turn FILE arguments (default: --path) into existing paths."""
    options: LoadOptions = ctx.obj["options"]
    names = list(files) or [ctx.obj["path"]]
    found: list[Path] = []
    for name in names:
        path = find_env_file(name, traverse=not options.only_exact_path)
        if path is None:
            raise click.BadParameter(f"File not found: {name}", param_hint="FILE")
        found.append(path)
    return found


def _load_values(ctx: click.Context, files: tuple[str, ...]) -> dict[str, str]:
    """Resolve FILE arguments without touching the environment."""
    options: LoadOptions = ctx.obj["options"]
    paths = _resolve_files(ctx, files)
    try:
        return load_multi(paths, options.no_env_vars())
    except ParseError as e:
        raise click.ClickException(str(e))


def _get_target(name: str, path: str | None = None) -> EnvTarget:
    try:
        target_cls = get_target_class(name)
    except KeyError as e:
        raise click.UsageError(str(e.args[0]))
    return target_cls.from_config(path=path)


def _given(ctx: click.Context, name: str) -> bool:
    """True when *name* came from the command line rather than its default."""
    return ctx.get_parameter_source(name) is ParameterSource.COMMANDLINE


def file_arguments(f: Callable[..., Any]) -> Callable[..., Any]:
    """Add optional FILE... arguments (default: --path / config) to a command."""
    @functools.wraps(f)
    @click.argument("files", nargs=-1, type=click.Path(dir_okay=True))
    @click.pass_context
    def wrapper(ctx: click.Context, files: tuple[str, ...], *args: object, **kwargs: object) -> object:
        return f(ctx, files, *args, **kwargs)
    return wrapper


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option("--path", default=None, help="Default .env file (default: ENVLOAD_PATH or config, else .env).")
@click.option("--traverse", is_flag=True, help="Search parent directories for the file.")
@click.option(
    "--clobber", "clobber", type=click.Choice(_CLOBBER_CHOICES), default=None,
    help="Duplicate/existing key policy (default: ENVLOAD_CLOBBER or config, else clobber).",
)
@click.option(
    "--include-env/--exclude-env", "include_env", default=True,
    help="Let $NAME fall back to the current environment (default: include).",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    path: str | None,
    traverse: bool,
    clobber: str | None,
    include_env: bool,
    verbose: bool,
) -> None:
    """Parse, check and export .env files."""
    try:
        setup_logging(verbose=verbose)
        cfg = load_config().with_environ(os.environ)
    except ValueError as e:
        raise click.UsageError(f"Invalid configuration: {e}")
    if path is not None:
        cfg = replace(cfg, path=path)
    if traverse:
        cfg = replace(cfg, traverse=True)
    if clobber is not None:
        cfg = replace(cfg, clobber=ClobberPolicy.from_name(clobber))
    if _given(ctx, "include_env"):
        cfg = replace(cfg, include_env=include_env)

    ctx.ensure_object(dict)
    ctx.obj["path"] = cfg.path
    ctx.obj["options"] = LoadOptions.from_config(cfg)


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from envload.cli import (  # noqa: E402, F401
    check_cmd,
    export_cmd,
    get_cmd,
    list_cmd,
    merge_cmd,
    targets_cmd,
)

__all__ = [
    "HAS_YAML",
    "cli",
    "console",
    "file_arguments",
    "get_target_entries",
    "mask",
]
