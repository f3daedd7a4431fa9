# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""envloader CLI -- inspect and export typed values from .env files.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``load_environment``, etc.)
live here so every command module can import them.
"""

from __future__ import annotations

import logging
import os

import click
from rich.console import Console
from rich.logging import RichHandler

from envloader import __version__
from envloader.config import load_config
from envloader.environment import Environment
from envloader.errors import EnvLoaderError
from envloader.reconcile import Source

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

console = Console(stderr=True)

SOURCE_NAMES = {source.name.lower(): source for source in Source}


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _source_flags(names: tuple[str, ...]) -> int:
    flags = 0
    for name in names:
        flags |= SOURCE_NAMES[name]
    return flags


def _setup_logging(verbose: bool) -> None:
    """Route envloader debug records to the console for this invocation only."""
    logger = logging.getLogger("envloader")
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)
    if not verbose:
        logger.setLevel(logging.NOTSET)
        return
    logger.addHandler(RichHandler(console=console, show_time=False, show_path=False))
    logger.setLevel(logging.DEBUG)


def get_environment(ctx: click.Context) -> Environment:
    """Build the Environment described by global options, env vars and config."""
    cfg = ctx.obj["config"]
    endline = ctx.obj["endline"]
    max_depth = ctx.obj["max_depth"]
    use_cache = ctx.obj["cache"]
    env = Environment(
        ctx.obj["folders"] or cfg.resolved_folders(),
        ctx.obj["filename"] or cfg.filename,
        endline=cfg.endline if endline is None else endline,
        max_depth=cfg.max_depth if max_depth is None else max_depth,
    )
    if use_cache is None:
        use_cache = cfg.cache
    if use_cache:
        env.enable_cache()
    if ctx.obj["flush"]:
        env.flush_cache()
    return env


def load_environment(ctx: click.Context) -> Environment:
    """Load the env file, turning parse failures into a clean CLI error."""
    env = get_environment(ctx)
    try:
        env.load()
        if ctx.obj["complete"]:
            env.complete(_source_flags(ctx.obj["complete"]))
        if ctx.obj["override"]:
            env.override(_source_flags(ctx.obj["override"]))
    except EnvLoaderError as e:
        raise click.ClickException(str(e))
    return env


def type_name(value: object) -> str:
    if value is None:
        return "null"
    return type(value).__name__


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--folder", "-f", "folders", multiple=True,
    help="Folder to search for the env file (repeatable, first match wins). Default: ENVLOADER_FOLDERS or config, else cwd.",
)
@click.option("--file", "filename", default=None, help="Env file name (default: ENVLOADER_FILENAME or config, else .env).")
@click.option("--cache/--no-cache", default=None, help="Read/write the .cache.json snapshot next to the env file.")
@click.option("--flush", is_flag=True, help="Discard the cache and parse the file again.")
@click.option("--endline", default=None, help="Separator inserted between lines of multi-line values.")
@click.option("--max-depth", type=int, default=None, help="Maximum nesting of @include directives (default: 5).")
@click.option(
    "--complete", "complete", multiple=True, type=click.Choice(sorted(SOURCE_NAMES)),
    help="Fill empty values from this source (repeatable).",
)
@click.option(
    "--override", "override", multiple=True, type=click.Choice(sorted(SOURCE_NAMES)),
    help="Overwrite values from this source (repeatable).",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    folders: tuple[str, ...],
    filename: str | None,
    cache: bool | None,
    flush: bool,
    endline: str | None,
    max_depth: int | None,
    complete: tuple[str, ...],
    override: tuple[str, ...],
    verbose: bool,
) -> None:
    """Parse .env files into typed values."""
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config()
    ctx.obj["folders"] = [os.path.abspath(f) for f in folders]
    ctx.obj["filename"] = filename
    ctx.obj["cache"] = cache
    ctx.obj["flush"] = flush
    ctx.obj["endline"] = endline
    ctx.obj["max_depth"] = max_depth
    ctx.obj["complete"] = complete
    ctx.obj["override"] = override
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from envloader.cli import (  # noqa: E402, F401
    cache_cmd,
    check_cmd,
    export_cmd,
    get_cmd,
    list_cmd,
)
