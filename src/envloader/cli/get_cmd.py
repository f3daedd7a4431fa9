# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envloader get`` command."""

from __future__ import annotations

import click

from envloader.cli import cli, load_environment
from envloader.values import to_text


@cli.command()
@click.argument("key")
@click.option("--default", "default", default=None, help="Printed when KEY is not defined.")
@click.pass_context
def get(ctx: click.Context, key: str, default: str | None) -> None:
    """Print a single value."""
    env = load_environment(ctx)
    if not env.exists(key):
        if default is None:
            raise click.ClickException(f"Key '{key}' not found.")
        click.echo(default)
        return
    click.echo(to_text(env.get(key)))
