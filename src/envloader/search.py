"""Locate an env file on an ordered list of folders."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from envloader.errors import EnvFileNotFoundError

logger = logging.getLogger(__name__)


def normalize_folders(folders: str | Path | Sequence[str | Path]) -> list[Path]:
    """Accept a single folder or a sequence of folders and return a list of paths."""
    if isinstance(folders, (str, Path)):
        return [Path(folders)]
    return [Path(f) for f in folders]


def find_file(folders: str | Path | Sequence[str | Path], filename: str) -> Path:
    """Return the path of *filename* in the first folder that contains it."""
    for folder in normalize_folders(folders):
        candidate = folder / filename
        if candidate.is_file():
            logger.debug("Found %s in %s", filename, folder)
            return candidate
    raise EnvFileNotFoundError(filename)
