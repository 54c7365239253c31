"""
Alternating-pass sort: сортировка чередующимися проходами

Brick-wall сеть сравнений над рядом 2n дисков:
- чётный проход i: пары (j, j+1) для j = 0, 2, 4, ... < 2n
- нечётный проход i: пары (j, j+1) для j = 1, 3, 5, ... < 2n - 2

Пара out of order, если DARK стоит непосредственно левее LIGHT.
Ровно n + 1 проходов (i = 0 .. n), без раннего выхода.

Каждый светлый диск на позиции 2k должен сдвинуться влево на k позиций,
и сдвигается на одну позицию за каждый нечётный/чётный проход, начиная
с первого нечётного; n + 1 проходов достаточно для любого n >= 1.
"""

import logging
from typing import Optional

from src.core.domain.disk_row import DiskColor, DiskRow
from src.core.domain.sort_result import SortResult
from src.sorting.config import SortConfig, check_sorted

logger = logging.getLogger(__name__)


def _is_out_of_order(row: DiskRow, j: int) -> bool:
    return row.get(j) == DiskColor.DARK and row.get(j + 1) == DiskColor.LIGHT


def _run_pass(row: DiskRow, start: int, stop: int) -> int:
    """
    Один проход по непересекающимся парам (j, j+1), j = start, start+2, ... < stop.

    Returns:
        Количество обменов за проход
    """
    swaps = 0
    for j in range(start, stop, 2):
        if _is_out_of_order(row, j):
            row.swap(j)
            swaps += 1
    return swaps


def sort_alternating(before: DiskRow, config: Optional[SortConfig] = None) -> SortResult:
    """
    Сортировка ряда алгоритмом чередующихся проходов.

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

    if n == 0:
        return SortResult.of(after, swap_count)

    for i in range(n + 1):
        if i % 2 == 0:
            swaps = _run_pass(after, 0, 2 * n)
        else:
            swaps = _run_pass(after, 1, 2 * n - 2)
        swap_count += swaps
        logger.debug("alternating pass %d/%d: %d swaps -> %s", i, n, swaps, after)

    check_sorted(after, "alternating", config)

    logger.info(f"alternating sort: n={n}, passes={n + 1}, swaps={swap_count}")
    return SortResult.of(after, swap_count)
