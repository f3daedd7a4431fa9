# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Reconcile loaded values with the process environment or a server block.

After a file is loaded, values may be taken from outside sources selected by a
:class:`Source` bitmask:

- ``GETENV``: :func:`os.getenv`
- ``ENV``: an environ mapping (``os.environ`` unless another one is supplied)
- ``SERVER``: a request-context mapping, e.g. a WSGI ``environ`` dict

:func:`complete` only fills keys whose value is an empty string;
:func:`override` replaces every key the source knows.  The ``*_ALL`` variants
additionally import source keys that the file never defined.  Textual source
values go through the same type coercion as file values.
"""

from __future__ import annotations

import enum
import logging
import os
from collections.abc import Callable, Iterable, Mapping, MutableMapping
from typing import Any

from envloader.env_file import validate_key
from envloader.errors import EnvLoaderError
from envloader.values import Value, coerce

logger = logging.getLogger(__name__)


class Source(enum.IntFlag):
    GETENV = 1
    ENV = 2
    SERVER = 4
    GETENV_ALL = 8
    ENV_ALL = 16
    SERVER_ALL = 32


_NOT_SCALAR = object()


def is_valid_key(key: str) -> bool:
    """Return True if *key* could have been defined in an env file."""
    if not key:
        return False
    try:
        validate_key(key)
    except EnvLoaderError:
        return False
    return True


def complete(
    values: MutableMapping[str, Value],
    flags: int,
    *,
    environ: Mapping[str, Any] | None = None,
    server: Mapping[str, Any] | None = None,
) -> int:
    """Fill empty-string values from the selected sources.  Returns the number of writes."""
    return _apply(values, flags, environ, server, replace=False)


def override(
    values: MutableMapping[str, Value],
    flags: int,
    *,
    environ: Mapping[str, Any] | None = None,
    server: Mapping[str, Any] | None = None,
) -> int:
    """Overwrite values from the selected sources.  Returns the number of writes."""
    return _apply(values, flags, environ, server, replace=True)


def _sources(
    environ: Mapping[str, Any] | None,
    server: Mapping[str, Any] | None,
) -> list[tuple[Source, Source, Callable[[str], Any], Callable[[], Iterable[tuple[str, Any]]]]]:
    env = os.environ if environ is None else environ
    srv: Mapping[str, Any] = {} if server is None else server
    return [
        (Source.GETENV, Source.GETENV_ALL, os.getenv, lambda: list(os.environ.items())),
        (Source.ENV, Source.ENV_ALL, env.get, lambda: list(env.items())),
        (Source.SERVER, Source.SERVER_ALL, srv.get, lambda: list(srv.items())),
    ]


def _from_source(raw: Any) -> Any:
    if isinstance(raw, str):
        return coerce(raw)
    if isinstance(raw, (bool, int, float)):
        return raw
    return _NOT_SCALAR


def _apply(
    values: MutableMapping[str, Value],
    flags: int,
    environ: Mapping[str, Any] | None,
    server: Mapping[str, Any] | None,
    *,
    replace: bool,
) -> int:
    flags = Source(flags)
    written = 0
    for plain, every, lookup, items in _sources(environ, server):
        if not flags & (plain | every):
            continue

        for key in list(values):
            if not replace and values[key] != "":
                continue
            raw = lookup(key)
            if raw is None:
                continue
            value = _from_source(raw)
            if value is _NOT_SCALAR:
                continue
            values[key] = value
            written += 1

        if flags & every:
            for key, raw in items():
                if key in values or not is_valid_key(key):
                    continue
                value = _from_source(raw)
                if value is _NOT_SCALAR:
                    continue
                values[key] = value
                written += 1

    mode = "override" if replace else "complete"
    logger.debug("Reconciled %d values (%s, flags=%d)", written, mode, int(flags))
    return written
