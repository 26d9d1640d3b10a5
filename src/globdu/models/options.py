"""Report options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Options:
    """How to order, filter and decorate the report."""

    reverse: bool = False
    percentages: bool = False
    by_path: bool = False
    min_percentage: float = 0.0
    pattern: str = "*"
