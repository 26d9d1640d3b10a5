"""Scan entry dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class Entry:
    """Disk usage of one top-level path matched by the pattern.

    ``size`` sums every non-directory node below ``path`` (symlinks by
    their own length), ``count`` counts every walked node including
    ``path`` itself.
    """

    path: Path
    size: int = 0
    count: int = 0


@dataclass(slots=True)
class ScanResult:
    """Grand totals over all expanded paths plus the visible entries."""

    total_bytes: int = 0
    total_count: int = 0
    entries: list[Entry] = field(default_factory=list)
