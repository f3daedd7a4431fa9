# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envloader check`` command."""

from __future__ import annotations

import click

from envloader.cli import cli, console, load_environment


@cli.command()
@click.argument("keys", nargs=-1)
@click.pass_context
def check(ctx: click.Context, keys: tuple[str, ...]) -> None:
    """Parse the env file and report errors.

    When KEYS are given, also fail unless every one of them is defined.
    """
    env = load_environment(ctx)
    if keys and not env.exists(list(keys)):
        missing = [k for k in keys if not env.exists(k)]
        raise click.ClickException(f"Missing key(s): {', '.join(missing)}")
    console.print(f"[green]OK: {len(env.get_all())} value(s) from {env.filepath}[/green]")
