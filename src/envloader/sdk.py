"""SDK for loading env files into the process environment (python-dotenv style)."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from envloader.config import load_config
from envloader.environment import Environment
from envloader.values import Value, to_text


def _make_environment(
    folders: str | Path | Sequence[str | Path] | None,
    filename: str | None,
    cache: bool | None,
    endline: str | None,
    max_depth: int | None,
) -> Environment:
    """Resolve options from args, then ENVLOADER_* env vars and config (same as CLI)."""
    cfg = load_config()
    env = Environment(
        folders if folders is not None else cfg.resolved_folders(),
        filename or cfg.filename,
        endline=cfg.endline if endline is None else endline,
        max_depth=cfg.max_depth if max_depth is None else max_depth,
    )
    if cache is None:
        cache = cfg.cache
    if cache:
        env.enable_cache()
    return env


def dotenv_values(
    folders: str | Path | Sequence[str | Path] | None = None,
    filename: str | None = None,
    *,
    cache: bool | None = None,
    endline: str | None = None,
    max_depth: int | None = None,
) -> dict[str, Value]:
    """Return the typed values of an env file without modifying os.environ.

    Parameters
    ----------
    folders : str, Path or sequence, optional
        Search path. Defaults from ENVLOADER_FOLDERS or config, else cwd.
    filename : str, optional
        Env file name. Defaults from ENVLOADER_FILENAME or config, else ``.env``.
    cache : bool, optional
        Read/write the ``.cache.json`` snapshot. Defaults from config.
    endline : str, optional
        Separator between the lines of multi-line values. Defaults from config,
        else ``os.linesep``.
    max_depth : int, optional
        Maximum ``@`` include nesting. Defaults from config, else 5.

    Returns
    -------
    dict
        Mapping of key to bool, None, int, float or str.
    """
    return _make_environment(folders, filename, cache, endline, max_depth).get_all()


def load_dotenv(
    folders: str | Path | Sequence[str | Path] | None = None,
    filename: str | None = None,
    *,
    override: bool = True,
    cache: bool | None = None,
    endline: str | None = None,
    max_depth: int | None = None,
) -> bool:
    """Load an env file into os.environ (python-dotenv compatible API).

    Values are written as text: ``true``/``false`` for booleans, an empty
    string for ``null``.  With ``override=False`` keys already present in
    os.environ are left alone.

    Returns
    -------
    bool
        True if at least one variable was set, False otherwise.

    Examples
    --------
    >>> from envloader import load_dotenv
    >>> load_dotenv("config", ".env.local")
    True
    """
    values = dotenv_values(folders, filename, cache=cache, endline=endline, max_depth=max_depth)
    count = 0
    for key, value in values.items():
        if key in os.environ and not override:
            continue
        os.environ[key] = to_text(value)
        count += 1
    return count > 0
