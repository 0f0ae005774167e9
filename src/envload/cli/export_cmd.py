# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envload export`` and ``envload unexport`` commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console

from envload.cli import HAS_YAML, _load_values, cli, console, file_arguments
from envload.targets.file_target import format_env_value

if HAS_YAML:
    import yaml


# ---------------------------------------------------------------------------
# export
# ---------------------------------------------------------------------------

@cli.command("export")
@click.option(
    "--format", "fmt",
    type=click.Choice(["dotenv", "unix", "win", "json", "yaml"]),
    default="dotenv",
    help="Output format: dotenv (default, KEY=value), unix (export KEY=value), win (PowerShell), json, yaml.",
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False),
    default=None,
    help="Output file path (default: stdout).",
)
@file_arguments
def export(ctx: click.Context, files: tuple[str, ...], fmt: str, output: str | None) -> None:
    """Resolve .env files and print the result.

    Default format is dotenv, re-quoted so the output parses back to the same
    values. Use --format unix for shell sourcing:
    eval "$(envload export --format unix)". Use --format win for
    PowerShell: envload export --format win | Invoke-Expression (or iex).
    """
    pairs = _load_values(ctx, files)

    if fmt == "yaml" and not HAS_YAML:
        raise click.ClickException("PyYAML is not installed. Install with: pip install 'envload[yaml]'")

    if output:
        path = Path(output)
        with path.open("w", encoding="utf-8") as f:
            if fmt == "json":
                f.write(json.dumps(pairs, indent=2, ensure_ascii=False))
                f.write("\n")
            elif fmt == "yaml":
                yaml.safe_dump(pairs, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
            else:
                for line in _format_export_lines(pairs, fmt):
                    f.write(line + "\n")
        console.print(f"[green]Exported {len(pairs)} variable(s) to {output}[/green]")
    else:
        if fmt == "yaml":
            yaml.safe_dump(pairs, sys.stdout, default_flow_style=False, sort_keys=False, allow_unicode=True)
            return
        out = Console(file=sys.stdout, highlight=False, markup=False, emoji=False, soft_wrap=True)
        if fmt == "json":
            out.print(json.dumps(pairs, indent=2, ensure_ascii=False))
        else:
            for line in _format_export_lines(pairs, fmt):
                out.print(line)


def _shell_escape(value: str) -> str:
    """Escape for Unix sh: single-quote wrapped, internal ' -> '\\''."""
    if not value or any(c in value for c in " \t\n'\"\\$`!#&|;(){}*?<>~"):
        return "'" + value.replace("'", "'\\''") + "'"
    return value


def _powershell_escape(value: str) -> str:
    """Escape for PowerShell single-quoted string: ' -> ''."""
    return value.replace("'", "''")


def _format_export_lines(pairs: dict[str, str], fmt: str) -> list[str]:
    lines: list[str] = []
    for key, value in pairs.items():
        if fmt == "unix":
            lines.append(f"export {key}={_shell_escape(value)}")
        elif fmt == "win":
            lines.append(f"$env:{key} = '{_powershell_escape(value)}'")
        else:
            lines.append(f"{key}={format_env_value(value)}")
    return lines


# ---------------------------------------------------------------------------
# unexport
# ---------------------------------------------------------------------------

@cli.command("unexport")
@click.option(
    "--format", "fmt",
    type=click.Choice(["unix", "win"]),
    default="unix",
    help="Output format. Default: unix (unset KEY). Use win for PowerShell (Remove-Item Env:KEY).",
)
@file_arguments
def unexport(ctx: click.Context, files: tuple[str, ...], fmt: str) -> None:
    """Output shell unset commands for all variables that export would set.

    Unix: eval "$(envload export --format unix)" then eval "$(envload unexport)".
    """
    pairs = _load_values(ctx, files)
    out = Console(file=sys.stdout, highlight=False, markup=False, emoji=False, soft_wrap=True)
    for key in pairs:
        if fmt == "win":
            out.print(f"Remove-Item Env:{key} -ErrorAction SilentlyContinue")
        else:
            out.print(f"unset {key}")
