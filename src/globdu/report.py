"""Tabular report rendering."""

from __future__ import annotations

import os

from globdu.models.entry import Entry, ScanResult
from globdu.models.options import Options
from globdu.utils import display_path, format_count, format_size

SIZE_WIDTH = 10
PERCENT_WIDTH = 8  # " xx.xx% "


def sort_entries(entries: list[Entry], *, by_path: bool = False, reverse: bool = False) -> list[Entry]:
    """Order entries by size (ascending) or path, then optionally reverse."""
    if by_path:
        ordered = sorted(entries, key=lambda e: e.path)
    else:
        ordered = sorted(entries, key=lambda e: e.size)
    if reverse:
        ordered.reverse()
    return ordered


def percentage_of(size: int, total: int) -> float:
    """Share of *total* taken by *size*, in percent.

    An empty total yields 0.0 rather than NaN.
    """
    if total == 0:
        return 0.0
    return 100.0 * size / total


def format_row(entry: Entry, percent: float | None, count_width: int) -> str:
    """One report line; *percent* is None when the column is hidden."""
    line = f"{format_size(entry.size):>{SIZE_WIDTH}} "
    if percent is not None:
        line += f" {percent:>5.2f}% "
    line += f" {format_count(entry.count):>{count_width}} "
    suffix = os.sep if os.path.isdir(entry.path) else ""
    return f"{line} {display_path(entry.path)}{suffix}"


def format_footer(total_bytes: int, total_count: int, percentages: bool = False) -> list[str]:
    """Separator and totals lines, aligned under the count column."""
    count = format_count(total_count)
    pad = PERCENT_WIDTH if percentages else 0
    offset = pad + len(count) + 1
    separator = "-" * SIZE_WIDTH + " " * (pad + 2) + "-" * len(count)
    totals = f"{format_size(total_bytes):>{SIZE_WIDTH}} {count:>{offset}}"
    return [separator, totals]


def render_report(result: ScanResult, options: Options) -> list[str]:
    """Sort, filter and format *result* into printable lines.

    Entries below ``options.min_percentage`` are dropped from the table
    but stay in the totals.
    """
    count_width = len(format_count(result.total_count))
    lines: list[str] = []
    for entry in sort_entries(result.entries, by_path=options.by_path, reverse=options.reverse):
        percent = percentage_of(entry.size, result.total_bytes)
        if percent < options.min_percentage:
            continue
        lines.append(format_row(entry, percent if options.percentages else None, count_width))
    lines.extend(format_footer(result.total_bytes, result.total_count, options.percentages))
    return lines
