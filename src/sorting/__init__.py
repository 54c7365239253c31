"""Sorting: алгоритмы сортировки ряда дисков.

- Alternating-pass: n + 1 чередующихся чётных/нечётных проходов
- Lawnmower: до ceil(n / 2) double-pass с ранним выходом
"""

from .alternating import sort_alternating
from .config import SortConfig, SortPostconditionViolation
from .lawnmower import default_double_pass_limit, sort_lawnmower
from .strategy import SortAlgorithm, sort_disks

__all__ = [
    "sort_alternating",
    "sort_lawnmower",
    "sort_disks",
    "default_double_pass_limit",
    "SortAlgorithm",
    "SortConfig",
    "SortPostconditionViolation",
]
