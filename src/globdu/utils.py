"""Shared utility functions."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

log = logging.getLogger(__name__)

SIZE_UNITS = ("B", "K", "M", "G", "T", "P", "E", "Z", "Y")


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def tree_info(path: Path | str) -> tuple[int, int]:
    """Calculate total size and entry count of the tree rooted at *path*.

    A symlinked root pointing at a directory is walked through the link;
    below the root, symlinks contribute their own length and are never
    descended into.  Directories count as entries but add no bytes.
    Entries that cannot be stat'd or listed are skipped, and so is a
    dangling root link.

    Returns:
        (total_bytes, entry_count) tuple, the root itself included.
    """
    try:
        st = os.lstat(path)
    except OSError:
        log.debug("Cannot access: %s", path)
        return 0, 0

    if stat.S_ISLNK(st.st_mode):
        try:
            target = os.stat(path)
        except OSError:
            log.debug("Dangling link: %s", path)
            return 0, 0
        if not stat.S_ISDIR(target.st_mode):
            return st.st_size, 1
    elif not stat.S_ISDIR(st.st_mode):
        return st.st_size, 1

    total = 0
    count = 1
    stack: list[Path | str] = [path]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        st = entry.stat(follow_symlinks=False)
                    except OSError:
                        log.debug("Cannot access: %s", entry.path)
                        continue
                    count += 1
                    if stat.S_ISDIR(st.st_mode):
                        stack.append(entry.path)
                    else:
                        total += st.st_size
        except OSError:
            log.debug("Cannot read directory: %s", current)
    return total, count


def format_size(size_bytes: int) -> str:
    """Convert a byte count to a binary-scaled string such as ``1.50 K``."""
    value = float(size_bytes)
    order = 0
    while value >= 1024 and order + 1 < len(SIZE_UNITS):
        value /= 1024
        order += 1
    return f"{value:.2f} {SIZE_UNITS[order]}"


def format_count(count: int) -> str:
    """Render *count* with comma-separated thousands."""
    return f"{count:,}"


def display_path(path: Path | str) -> str:
    """Printable form of *path*; undecodable bytes become U+FFFD."""
    return os.fsencode(path).decode("utf-8", errors="replace")
