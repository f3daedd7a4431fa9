# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""On-disk snapshot of a parsed env file.

The cache lives next to the source file (``.env`` -> ``.env.cache.json``) and
holds the final mapping as JSON, which keeps bool/null/int/float/str apart
without any extra tagging::

    {"format": 1, "values": {"DEBUG": true, "PORT": 8080, "RATIO": 9.0}}
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from envloader.errors import CacheError
from envloader.values import Value

logger = logging.getLogger(__name__)

CACHE_SUFFIX: str = ".cache.json"
CACHE_FORMAT: int = 1

_SCALAR_TYPES = (bool, int, float, str, type(None))


def cache_path_for(path: str | Path) -> Path:
    """Return the cache file path for the env file at *path*."""
    path = Path(path)
    return path.with_name(path.name + CACHE_SUFFIX)


def save_cache(cache_path: str | Path, values: Mapping[str, Value]) -> None:
    """Write *values* to *cache_path*, replacing any previous snapshot."""
    cache_path = Path(cache_path)
    document = {"format": CACHE_FORMAT, "values": dict(values)}
    cache_path.write_text(json.dumps(document, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.debug("Saved %d values to %s", len(values), cache_path)


def load_cache(cache_path: str | Path) -> dict[str, Value]:
    """Read a snapshot written by :func:`save_cache`."""
    cache_path = Path(cache_path)
    try:
        document = json.loads(cache_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CacheError(f"Invalid cache file {cache_path}: {e}") from e

    if not isinstance(document, dict) or document.get("format") != CACHE_FORMAT:
        raise CacheError(f"Unsupported cache format in {cache_path}")
    values = document.get("values")
    if not isinstance(values, dict):
        raise CacheError(f"Invalid cache file {cache_path}: missing values")
    for key, value in values.items():
        if not isinstance(value, _SCALAR_TYPES):
            raise CacheError(f"Invalid cache value for {key} in {cache_path}")

    logger.debug("Loaded %d values from %s", len(values), cache_path)
    return values


def delete_cache(cache_path: str | Path) -> bool:
    """Remove the snapshot.  Returns True if a file was deleted."""
    cache_path = Path(cache_path)
    if not cache_path.is_file():
        return False
    cache_path.unlink()
    logger.debug("Deleted cache %s", cache_path)
    return True
