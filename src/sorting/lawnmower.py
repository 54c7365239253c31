"""
Lawnmower sort: двунаправленная сортировка (double-pass)

Double-pass:
1. Forward sweep: j = 0 .. 2n-2, обмен если get(j) == DARK и get(j+1) == LIGHT
2. Backward sweep: j = 2n-1 .. 1, обмен на j-1 если get(j) == LIGHT и get(j-1) == DARK

Оба sweep кодируют одно правило (DARK непосредственно левее LIGHT), записанное
для противоположных направлений обхода.

Лимит: ceil(n / 2) double-pass (или SortConfig.max_double_passes).
Ранний выход: double-pass без единого обмена означает, что ряд уже отсортирован.
"""

import logging
import math
from typing import Optional

from src.core.domain.disk_row import DiskColor, DiskRow
from src.core.domain.sort_result import SortResult
from src.sorting.config import SortConfig, check_sorted

logger = logging.getLogger(__name__)


def _forward_sweep(row: DiskRow) -> int:
    swaps = 0
    for j in range(row.total_count() - 1):
        if row.get(j) == DiskColor.DARK and row.get(j + 1) == DiskColor.LIGHT:
            row.swap(j)
            swaps += 1
    return swaps


def _backward_sweep(row: DiskRow) -> int:
    swaps = 0
    for j in range(row.total_count() - 1, 0, -1):
        if row.get(j) == DiskColor.LIGHT and row.get(j - 1) == DiskColor.DARK:
            row.swap(j - 1)
            swaps += 1
    return swaps


def default_double_pass_limit(light_count: int) -> int:
    """
    Лимит double-pass по умолчанию: ceil(n / 2).

    Examples:
        >>> default_double_pass_limit(1)
        1
        >>> default_double_pass_limit(4)
        2
        >>> default_double_pass_limit(5)
        3
    """
    return math.ceil(light_count / 2)


def sort_lawnmower(before: DiskRow, config: Optional[SortConfig] = None) -> SortResult:
    """
    Сортировка ряда алгоритмом lawnmower.

    Args:
        before: Исходный ряд (не изменяется)
        config: Конфигурация (default: SortConfig())

    Returns:
        SortResult с отсортированным рядом и количеством обменов

    Raises:
        SortPostconditionViolation: если config.verify_sorted и ряд не отсортирован
    """
    config = config or SortConfig()
    after = before.clone()
    n = after.total_count() // 2
    swap_count = 0

    limit = config.max_double_passes
    if limit is None:
        limit = default_double_pass_limit(n)

    passes = 0
    for i in range(limit):
        swaps = _forward_sweep(after)
        swaps += _backward_sweep(after)
        swap_count += swaps
        passes += 1
        logger.debug("lawnmower double-pass %d: %d swaps -> %s", i, swaps, after)

        if swaps == 0:
            break

    check_sorted(after, "lawnmower", config)

    logger.info(
        f"lawnmower sort: n={n}, double_passes={passes}/{limit}, swaps={swap_count}"
    )
    return SortResult.of(after, swap_count)
