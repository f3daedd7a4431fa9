# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envloader list`` command."""

from __future__ import annotations

import click
from rich.table import Table

from envloader.cli import cli, console, load_environment, type_name
from envloader.values import to_text


@cli.command("list")
@click.option("--no-values", is_flag=True, help="Show key names and types only.")
@click.pass_context
def list_values(ctx: click.Context, no_values: bool) -> None:
    """List loaded keys with their types and values."""
    env = load_environment(ctx)
    values = env.get_all()

    table = Table(title=f"Values ({env.filepath})")
    table.add_column("Key", style="cyan")
    table.add_column("Type", style="dim")
    if not no_values:
        table.add_column("Value", style="white")
    if not values:
        table.add_row("(empty)", "", *([] if no_values else [""]))
    for key, value in values.items():
        row = [key, type_name(value)]
        if not no_values:
            row.append(to_text(value))
        table.add_row(*row)
    console.print(table)
