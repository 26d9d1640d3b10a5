"""globdu data models."""

from globdu.models.entry import Entry, ScanResult
from globdu.models.options import Options

__all__ = [
    "Entry",
    "Options",
    "ScanResult",
]
