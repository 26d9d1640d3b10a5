"""Glob pattern validation and expansion."""

from __future__ import annotations

import glob
import logging
import os
import re
from pathlib import Path

log = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\\/]" if os.sep == "\\" else "/")


class PatternError(Exception):
    """Raised when a glob pattern is syntactically invalid."""


def validate_pattern(pattern: str) -> None:
    """Reject patterns the glob engine would silently misread.

    ``**`` is only meaningful as a whole path component, and every ``[``
    must open a closed character class.

    Raises:
        PatternError: If the pattern is malformed.
    """
    for component in _SEPARATORS.split(pattern):
        if "**" in component and component != "**":
            raise PatternError("recursive wildcards must form a single path component")

    pos = 0
    length = len(pattern)
    while pos < length:
        if pattern[pos] != "[":
            pos += 1
            continue
        start = pos + 1
        if start < length and pattern[start] == "!":
            start += 1
        # A ']' right after the opening bracket is a literal member.
        if start < length and pattern[start] == "]":
            start += 1
        close = pattern.find("]", start)
        if close == -1:
            raise PatternError(f"invalid range pattern at position {pos}")
        pos = close + 1


def expand_pattern(pattern: str) -> list[Path]:
    """Expand *pattern* into the sorted list of matching paths.

    Hidden entries are matched like any other name and ``**`` recurses.
    Directories that cannot be read while expanding are skipped.

    Raises:
        PatternError: If the pattern is malformed.
    """
    validate_pattern(pattern)
    paths = sorted(
        Path(p) for p in glob.iglob(pattern, recursive=True, include_hidden=True)
    )
    log.info("Pattern %r matched %d path(s)", pattern, len(paths))
    return paths
