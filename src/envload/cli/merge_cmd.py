# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envload merge`` command."""

from __future__ import annotations

import click

from envload.cli import _get_target, _resolve_files, cli, console, file_arguments
from envload.errors import ParseError
from envload.options import LoadOptions
from envload.sdk import load_multi


@cli.command("merge")
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="File written by the file target (required for --target file).",
)
@click.option(
    "--target", "target_name",
    default="file",
    show_default=True,
    help="Where merged values go (see 'envload targets').",
)
@file_arguments
def merge(ctx: click.Context, files: tuple[str, ...], output: str | None, target_name: str) -> None:
    """Resolve FILES in order and write the result into a target.

    Keys already in the target are handled by --clobber: with no-clobber they
    are left untouched.
    """
    if target_name == "file" and not output:
        raise click.UsageError("--output is required with --target file.")
    paths = _resolve_files(ctx, files)
    options: LoadOptions = ctx.obj["options"]
    target = _get_target(target_name, output)
    try:
        values = load_multi(paths, options.with_target(target))
    except ParseError as e:
        raise click.ClickException(str(e))
    where = output if target_name == "file" else target_name
    console.print(
        f"[green]Merged {len(values)} variable(s) from {len(paths)} file(s) into {where} "
        f"(policy: {options.clobber.value})[/green]"
    )
