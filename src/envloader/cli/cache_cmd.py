# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envloader clear-cache`` command."""

from __future__ import annotations

import click

from envloader.cache import delete_cache
from envloader.cli import cli, console, get_environment
from envloader.errors import EnvLoaderError


@cli.command("clear-cache")
@click.pass_context
def clear_cache(ctx: click.Context) -> None:
    """Delete the cache snapshot next to the env file."""
    env = get_environment(ctx)
    try:
        cache_path = env.cache_path
    except EnvLoaderError as e:
        raise click.ClickException(str(e))
    if delete_cache(cache_path):
        console.print(f"[green]Deleted {cache_path}[/green]")
    else:
        console.print(f"[yellow]No cache at {cache_path}[/yellow]")
