# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Scalar values: type coercion of raw tokens and ``$KEY`` substitution."""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Union

from envloader.errors import MissingVariableError

Value = Union[bool, None, int, float, str]

# Optional sign, digits with at most one decimal point, optional exponent.
_NUMERIC_RE = re.compile(
    r"""
    ^\s*
    [+-]?
    (?:\d+(?:\.\d*)?|\.\d+)
    (?:[eE][+-]?\d+)?
    $
    """,
    re.VERBOSE,
)

_LITERALS: dict[str, Value] = {"true": True, "false": False, "null": None}


def is_numeric(text: str) -> bool:
    """Return True if *text* is a plain decimal numeric literal."""
    return bool(_NUMERIC_RE.match(text))


def coerce(text: str) -> Value:
    """Convert a raw token into bool, None, int, float or leave it a string.

    ``true``/``false``/``null`` match case-insensitively.  Numbers containing a
    decimal point become floats, all other numbers become ints.
    """
    lowered = text.lower()
    if lowered in _LITERALS:
        return _LITERALS[lowered]
    if is_numeric(lowered):
        if "." in lowered:
            return float(lowered)
        if "e" in lowered:
            return int(Decimal(lowered))
        return int(lowered)
    return text


def to_text(value: Value) -> str:
    """Render a value the way it is written in an env file."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return ""
    return str(value)


def _reference_text(value: Value) -> str:
    """Text spliced in for a ``$KEY`` reference.

    ``true`` becomes ``1``; ``false`` and ``null`` become empty; whole floats
    drop their ``.0``.
    """
    if value is True:
        return "1"
    if value is False or value is None:
        return ""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return str(value)


def substitute(value: str, resolved: Mapping[str, Value]) -> str:
    """Replace ``$KEY`` with the value of every key already in *resolved*.

    Keys are applied once each, in insertion order, with no re-scan of the
    result.  Any ``$`` left afterwards means a reference to an unknown key.
    """
    for key, known in list(resolved.items()):
        value = value.replace("$" + key, _reference_text(known))

    if "$" in value:
        raise MissingVariableError(value)
    return value


def convert(text: str, resolved: Mapping[str, Value]) -> Value:
    """Coerce an unquoted token and substitute variables if it stays a string."""
    value = coerce(text)
    if isinstance(value, str):
        return substitute(value, resolved)
    return value
