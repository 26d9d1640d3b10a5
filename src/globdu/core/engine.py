"""Per-path aggregation over the expanded pattern."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from globdu.models.entry import Entry, ScanResult
from globdu.utils import tree_info

log = logging.getLogger(__name__)


def walk_entries(paths: Iterable[Path]) -> ScanResult:
    """Aggregate every path and collect the ones that still exist.

    Each path is walked once and always folded into the grand totals.
    An :class:`Entry` is only created when the path still exists after its
    walk, so a root that vanished mid-scan (or a dangling symlink) is
    counted but not listed.

    Args:
        paths: Expanded root paths, in the order they should be reported.

    Returns:
        Scan result with grand totals and entries in input order.
    """
    result = ScanResult()
    for path in paths:
        size, count = tree_info(path)
        result.total_bytes += size
        result.total_count += count
        if os.path.exists(path):
            result.entries.append(Entry(path=path, size=size, count=count))
        else:
            log.debug("Vanished during scan: %s", path)

    log.info(
        "Scanned %d bytes in %d entries, %d path(s) listed",
        result.total_bytes,
        result.total_count,
        len(result.entries),
    )
    return result
