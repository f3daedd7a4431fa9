# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exceptions raised while locating, parsing, caching or reconciling env files.

Every failure is fatal to the current load: callers catch :class:`EnvLoaderError`
and inspect the subclass (or its attributes) to tell the conditions apart.
"""

from __future__ import annotations


class EnvLoaderError(Exception):
    """Base class for every envloader failure."""


class EnvFileNotFoundError(EnvLoaderError):
    """The env file is absent from every search folder."""

    def __init__(self, filename: str) -> None:
        super().__init__("Env file not found")
        self.filename = filename


class MaxRecursionError(EnvLoaderError):
    """Nested ``@include`` directives went deeper than the configured maximum."""

    def __init__(self, max_depth: int) -> None:
        super().__init__("Max recursion env file!")
        self.max_depth = max_depth


class MissingIncludeError(EnvLoaderError):
    """An ``@include`` directive names a file that does not exist."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Missing env file {filename}")
        self.filename = filename


class UppercaseKeyError(EnvLoaderError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Key {key} must be uppercase")
        self.key = key


class NumericKeyError(EnvLoaderError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Key {key} must not be numeric")
        self.key = key


class UnterminatedMultilineError(EnvLoaderError):
    """The parse ended while a double-quoted value was still open."""

    def __init__(self, key: str) -> None:
        super().__init__(f'Key {key} is missing " for multilines')
        self.key = key


class MissingVariableError(EnvLoaderError):
    """A ``$NAME`` reference did not match any key defined earlier."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Missing variable in value {value}")
        self.value = value


class CacheError(EnvLoaderError):
    """A cache file exists but does not hold a valid snapshot."""
