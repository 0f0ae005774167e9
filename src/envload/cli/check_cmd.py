# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envload check`` command."""

from __future__ import annotations

import click
from rich.markup import escape

from envload.cli import _resolve_files, cli, console, file_arguments
from envload.env_file import parse_env_file
from envload.errors import ParseError


@cli.command("check")
@file_arguments
def check(ctx: click.Context, files: tuple[str, ...]) -> None:
    """Check that .env files parse, without resolving or loading them.

    Every file is checked; the exit code is 1 if any of them fails.
    """
    failed = 0
    for path in _resolve_files(ctx, files):
        try:
            assignments = parse_env_file(path)
        except ParseError as e:
            console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
            failed += 1
            continue
        keys = {a.key for a in assignments}
        console.print(
            f"[green]{escape(str(path))}: {len(assignments)} assignment(s), {len(keys)} key(s)[/green]",
            highlight=False,
        )
    if failed:
        ctx.exit(1)
