# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""envloader -- typed values from .env files with includes, multi-line strings and variables."""

from envloader.environment import Environment
from envloader.errors import (
    CacheError,
    EnvFileNotFoundError,
    EnvLoaderError,
    MaxRecursionError,
    MissingIncludeError,
    MissingVariableError,
    NumericKeyError,
    UnterminatedMultilineError,
    UppercaseKeyError,
)
from envloader.reconcile import Source
from envloader.sdk import dotenv_values, load_dotenv

__all__ = [
    "__version__",
    "Environment",
    "Source",
    "dotenv_values",
    "load_dotenv",
    "CacheError",
    "EnvFileNotFoundError",
    "EnvLoaderError",
    "MaxRecursionError",
    "MissingIncludeError",
    "MissingVariableError",
    "NumericKeyError",
    "UnterminatedMultilineError",
    "UppercaseKeyError",
]
__version__ = "0.1.0"
