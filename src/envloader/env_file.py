"""Parse .env files into typed key-value dicts.

Handles:
  - blank lines and ``#`` / ``;`` comments
  - ``@other.env`` directives, parsed in place from the including file's directory
  - ``KEY=value`` with the value coerced to bool, None, int, float or str
  - ``$KEY`` references in unquoted values, resolved against earlier keys
  - ``KEY="..."`` raw strings, possibly spanning lines, with ``\\"`` escapes
  - values with ``=`` in them (only first ``=`` splits)

Inside an open quoted value, a line is continuation text only when it has no
``=``; ``KEY=value`` lines are still assignments.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from envloader.errors import (
    MaxRecursionError,
    MissingIncludeError,
    NumericKeyError,
    UnterminatedMultilineError,
    UppercaseKeyError,
)
from envloader.values import Value, convert, is_numeric

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH: int = 5
DEFAULT_ENDLINE: str = os.linesep

_COMMENT_CHARS = ("#", ";")


@dataclass
class ResolutionContext:
    """Mutable state of one top-level parse, shared by every included file."""

    current_directory: Path
    endline: str = DEFAULT_ENDLINE
    max_depth: int = DEFAULT_MAX_DEPTH
    resolved: dict[str, Value] = field(default_factory=dict)
    pending_key: str | None = None
    pending_text: str = ""
    in_multiline: bool = False
    current_depth: int = 0

    def set(self, key: str, value: Value) -> None:
        self.resolved[key] = value

    def reset_pending(self) -> None:
        self.pending_key = None
        self.pending_text = ""
        self.in_multiline = False


def parse_env_file(
    path: str | Path,
    *,
    endline: str = DEFAULT_ENDLINE,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> dict[str, Value]:
    """Read a .env file (and everything it includes) and return its values."""
    path = Path(path)
    ctx = ResolutionContext(current_directory=path.parent, endline=endline, max_depth=max_depth)
    parse_content(path.read_text(encoding="utf-8"), ctx)
    finish(ctx)
    return ctx.resolved


def parse_env_string(
    content: str,
    directory: str | Path = ".",
    *,
    endline: str = DEFAULT_ENDLINE,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> dict[str, Value]:
    """Parse env text directly; ``@`` directives are resolved against *directory*."""
    ctx = ResolutionContext(current_directory=Path(directory), endline=endline, max_depth=max_depth)
    parse_content(content, ctx)
    finish(ctx)
    return ctx.resolved


def parse_content(content: str, ctx: ResolutionContext, depth: int = 0) -> None:
    """Feed every line of *content* into *ctx*.

    Called once for the top-level file and once more for each ``@`` directive,
    with *depth* counting the nesting.  The depth limit is checked before any
    line is read.
    """
    if depth > ctx.max_depth:
        raise MaxRecursionError(ctx.max_depth)
    ctx.current_depth = depth

    for line in _scan(content, ctx):
        if line.startswith("@"):
            _include(line, ctx, depth)
        else:
            _assign(line, ctx)


def finish(ctx: ResolutionContext) -> None:
    """Fail if the parse ended inside a quoted value."""
    if ctx.pending_key is not None:
        raise UnterminatedMultilineError(ctx.pending_key)


def validate_key(key: str) -> None:
    """Raise unless *key* is uppercase and not a number."""
    if key != key.upper():
        raise UppercaseKeyError(key)
    if is_numeric(key):
        raise NumericKeyError(key)


def _scan(content: str, ctx: ResolutionContext) -> Iterator[str]:
    # Lazy so that each line sees the multiline state left by the previous one.
    for line in content.split("\n"):
        if not ctx.in_multiline:
            line = line.lstrip()
            if _is_empty_line(line):
                continue
        yield line


def _is_empty_line(line: str) -> bool:
    return not line or line.startswith(_COMMENT_CHARS)


def _include(line: str, ctx: ResolutionContext, depth: int) -> None:
    filename = line.rstrip()[1:]
    path = ctx.current_directory / filename
    if not path.is_file():
        raise MissingIncludeError(filename)

    logger.debug("Including %s at depth %d", path, depth + 1)
    outer_directory = ctx.current_directory
    ctx.current_directory = path.parent
    try:
        parse_content(path.read_text(encoding="utf-8"), ctx, depth + 1)
    finally:
        ctx.current_directory = outer_directory
        ctx.current_depth = depth


def _assign(line: str, ctx: ResolutionContext) -> None:
    """Split on the first ``=``; a line without one only matters inside quotes.

    A ``KEY=value`` line is assigned even while a quoted value is open.  The
    open value keeps collecting the lines that follow.
    """
    key, sep, raw = line.partition("=")
    if not sep:
        if ctx.in_multiline:
            _extract_text(line, ctx)
        return
    validate_key(key)

    if raw.startswith('"'):
        ctx.pending_key = key
        _extract_text(raw[1:], ctx)
        return

    ctx.set(key, convert(raw.rstrip(), ctx.resolved))


def _extract_text(text: str, ctx: ResolutionContext) -> None:
    """Accumulate quoted text until the first unescaped closing quote."""
    offset = 0
    while True:
        offset = text.find('"', offset)
        if offset == -1:
            ctx.pending_text += text.rstrip("\r\n") + ctx.endline
            ctx.in_multiline = True
            return
        if offset > 0 and text[offset - 1] == "\\":
            offset += 1
            continue
        break

    value = (ctx.pending_text + text[:offset]).replace('\\"', '"')
    # pending_key is always set on entry: by _assign or by a still-open value
    ctx.set(ctx.pending_key, value)  # type: ignore[arg-type]
    ctx.reset_pending()
