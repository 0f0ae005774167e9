# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envload targets`` command."""

from __future__ import annotations

import click
from rich.table import Table

from envload.cli import cli, console, get_target_entries


@cli.command("targets")
@click.pass_context
def targets(ctx: click.Context) -> None:
    """List the targets that ``merge --target`` accepts."""
    table = Table(title="Targets")
    table.add_column("Target", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Class", style="dim")
    for name, target_cls in get_target_entries():
        table.add_row(
            name,
            target_cls.service_display_name,
            f"{target_cls.__module__}.{target_cls.__qualname__}",
        )
    console.print(table)
