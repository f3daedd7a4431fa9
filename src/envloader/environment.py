# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""The :class:`Environment` facade: find, parse, cache and query one env file."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from envloader.cache import cache_path_for, delete_cache, load_cache, save_cache
from envloader.env_file import DEFAULT_ENDLINE, DEFAULT_MAX_DEPTH, parse_env_file
from envloader.errors import EnvLoaderError
from envloader.reconcile import complete as reconcile_complete
from envloader.reconcile import override as reconcile_override
from envloader.search import find_file, normalize_folders
from envloader.values import Value

if TYPE_CHECKING:
    from envloader.config import EnvLoaderConfig

logger = logging.getLogger(__name__)


class Environment:
    """Typed values from the first ``filename`` found in ``folders``.

    The file is parsed lazily on the first getter call (or explicitly with
    :meth:`load`).  With caching enabled the parsed mapping is written next to
    the file and served from there on later loads until :meth:`flush_cache`
    forces a re-parse.

    Parameters
    ----------
    folders : str, Path or sequence of them
        Search path; the first folder holding *filename* wins.
    filename : str, default ".env"
        Name of the env file to look for.
    endline : str, default os.linesep
        Inserted between the lines of a multi-line quoted value.
    max_depth : int, default 5
        Deepest allowed nesting of ``@`` include directives.
    environ : mapping, optional
        Source for :attr:`Source.ENV` reconciliation (default ``os.environ``).
    server : mapping, optional
        Source for :attr:`Source.SERVER` reconciliation, e.g. a WSGI environ.
    """

    def __init__(
        self,
        folders: str | Path | Sequence[str | Path],
        filename: str = ".env",
        *,
        endline: str = DEFAULT_ENDLINE,
        max_depth: int = DEFAULT_MAX_DEPTH,
        environ: Mapping[str, Any] | None = None,
        server: Mapping[str, Any] | None = None,
    ) -> None:
        self._folders = normalize_folders(folders)
        self._filename = filename
        self._endline = endline
        self._max_depth = max_depth
        self._environ = environ
        self._server = server
        self._env: dict[str, Value] = {}
        self._has_loaded = False
        self._use_cache = False
        self._has_to_flush = False
        self._filepath: Path | None = None

    @classmethod
    def from_config(cls, cfg: EnvLoaderConfig, **kwargs: Any) -> Environment:
        """Build an instance from a loaded ``.envloader.toml``."""
        env = cls(
            cfg.resolved_folders(),
            cfg.filename,
            endline=cfg.endline,
            max_depth=cfg.max_depth,
            **kwargs,
        )
        if cfg.cache:
            env.enable_cache()
        return env

    @property
    def folders(self) -> list[Path]:
        return list(self._folders)

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def filepath(self) -> Path | None:
        """Path of the env file found by the last load, if any."""
        return self._filepath

    @property
    def cache_path(self) -> Path:
        """Where the cache for this file lives (the file is located if needed)."""
        return cache_path_for(self._filepath or find_file(self._folders, self._filename))

    @property
    def endline(self) -> str:
        return self._endline

    @endline.setter
    def endline(self, value: str) -> None:
        self._endline = value

    def get_endline(self) -> str:
        return self._endline

    def set_endline(self, endline: str) -> None:
        self._endline = endline

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @max_depth.setter
    def max_depth(self, value: int) -> None:
        self._max_depth = value

    def enable_cache(self) -> None:
        self._use_cache = True

    def disable_cache(self) -> None:
        self._use_cache = False

    def flush_cache(self) -> None:
        """Discard any existing cache on the next load and parse the file again."""
        self._has_to_flush = True

    def load(self) -> None:
        """Locate and parse the env file, or read it from the cache."""
        filepath = find_file(self._folders, self._filename)
        cache_path = cache_path_for(filepath)

        if self._use_cache and cache_path.is_file():
            if self._has_to_flush:
                delete_cache(cache_path)
                values = self._parse(filepath)
                save_cache(cache_path, values)
                self._has_to_flush = False
            else:
                logger.debug("Using cache %s", cache_path)
                values = load_cache(cache_path)
        else:
            values = self._parse(filepath)
            if self._use_cache:
                save_cache(cache_path, values)

        self._env = values
        self._filepath = filepath
        self._has_loaded = True

    def _parse(self, filepath: Path) -> dict[str, Value]:
        logger.debug("Parsing %s", filepath)
        return parse_env_file(filepath, endline=self._endline, max_depth=self._max_depth)

    def _autoload(self) -> None:
        if not self._has_loaded:
            self.load()

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for *key*, or *default* if it is not defined."""
        self._autoload()
        if key not in self._env:
            return default
        return self._env[key]

    def get_all(self) -> dict[str, Value]:
        """Return a copy of every loaded value."""
        self._autoload()
        return dict(self._env)

    def exists(self, keys: str | Iterable[str]) -> bool:
        """Return True if *keys* (one name or several) are all defined."""
        self._autoload()
        if isinstance(keys, str):
            keys = [keys]
        return all(key in self._env for key in keys)

    def allowed_values(self, key: str, values: Iterable[Any]) -> bool:
        """Return True if the value of *key* is one of *values* (same type and value)."""
        if not self.exists(key):
            raise EnvLoaderError(f"Variable {key} doesn't exist")
        current = self._env[key]
        return any(type(v) is type(current) and v == current for v in values)

    def complete(self, flags: int) -> int:
        """Fill empty values from the sources in *flags*.  See :mod:`envloader.reconcile`."""
        self._autoload()
        return reconcile_complete(self._env, flags, environ=self._environ, server=self._server)

    def override(self, flags: int) -> int:
        """Overwrite values from the sources in *flags*.  See :mod:`envloader.reconcile`."""
        self._autoload()
        return reconcile_override(self._env, flags, environ=self._environ, server=self._server)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.exists(key)

    def __getitem__(self, key: str) -> Value:
        self._autoload()
        return self._env[key]

    def __repr__(self) -> str:
        return f"Environment(folders={[str(f) for f in self._folders]!r}, filename={self._filename!r})"
