"""
Domain models and value objects.

Contains the disk row model and the sort result value.
"""

from src.core.domain.disk_row import (
    ConstructionError,
    DiskColor,
    DiskRow,
    IndexOutOfRange,
)
from src.core.domain.sort_result import SortResult

__all__ = [
    # Disk row
    "DiskColor",
    "DiskRow",
    "ConstructionError",
    "IndexOutOfRange",
    # Sort result
    "SortResult",
]
