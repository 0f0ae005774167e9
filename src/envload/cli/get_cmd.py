# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envload get`` command."""

from __future__ import annotations

import click

from envload.cli import _load_values, cli, file_arguments


@cli.command("get")
@click.argument("key")
@file_arguments
def get_value(ctx: click.Context, files: tuple[str, ...], key: str) -> None:
    """Print the resolved value of KEY."""
    pairs = _load_values(ctx, files)
    if key not in pairs:
        raise click.ClickException(f"Key '{key}' not found.")
    click.echo(pairs[key])
