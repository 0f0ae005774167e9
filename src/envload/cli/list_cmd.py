# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envload list`` command."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.table import Table

from envload.cli import _load_values, cli, console, file_arguments, mask


@cli.command("list")
@click.option("--show-values", is_flag=True, help="Show values instead of masking them.")
@file_arguments
def list_keys(ctx: click.Context, files: tuple[str, ...], show_values: bool) -> None:
    """List resolved variables in file order (values masked)."""
    pairs = _load_values(ctx, files)
    title = "Variables" if files else f"Variables ({ctx.obj['path']})"
    table = Table(title=title)
    table.add_column("Key", style="white")
    table.add_column("Value" if show_values else "Value (masked)", style="dim")
    if not pairs:
        table.add_row("(empty)", "(empty)")
    else:
        for key, val in pairs.items():
            table.add_row(key, escape(val if show_values else mask(val)))
    console.print(table)
