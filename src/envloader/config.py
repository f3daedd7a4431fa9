""".envloader.toml configuration loading.

Searches upward from cwd for ``.envloader.toml``; ``ENVLOADER_FOLDERS`` and
``ENVLOADER_FILENAME`` override what the file says.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from envloader.env_file import DEFAULT_ENDLINE, DEFAULT_MAX_DEPTH

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILENAME = ".envloader.toml"


@dataclass
class EnvLoaderConfig:
    """Resolved configuration for the current invocation."""

    folders: list[str] = field(default_factory=lambda: ["."])
    filename: str = ".env"
    cache: bool = False
    endline: str = DEFAULT_ENDLINE
    max_depth: int = DEFAULT_MAX_DEPTH
    config_path: Path | None = None

    def resolved_folders(self) -> list[Path]:
        """Folders as paths; relative ones are taken from the config file's directory."""
        base = self.config_path.parent if self.config_path is not None else None
        result: list[Path] = []
        for folder in self.folders:
            p = Path(folder)
            if base is not None and not p.is_absolute():
                p = base / p
            result.append(p)
        return result


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.envloader.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def load_config(path: Path | None = None, *, use_env: bool = True) -> EnvLoaderConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()

    cfg = EnvLoaderConfig()
    if path is not None:
        raw: dict[str, Any] = tomllib.loads(path.read_text())
        section = raw.get("envloader", {})
        folders = section.get("folders", ["."])
        if isinstance(folders, str):
            folders = [folders]
        cfg = EnvLoaderConfig(
            folders=list(folders),
            filename=section.get("filename", ".env"),
            cache=bool(section.get("cache", False)),
            endline=section.get("endline", DEFAULT_ENDLINE),
            max_depth=int(section.get("max_depth", DEFAULT_MAX_DEPTH)),
            config_path=path,
        )

    if use_env:
        env_folders = os.environ.get("ENVLOADER_FOLDERS")
        if env_folders:
            # relative to cwd, not to the config file
            cfg.folders = [str(Path(f).resolve()) for f in env_folders.split(os.pathsep) if f]
        cfg.filename = os.environ.get("ENVLOADER_FILENAME") or cfg.filename
    return cfg
