"""
Выбор алгоритма сортировки в runtime.

Оба алгоритма имеют одинаковый контракт:
    (DiskRow, Optional[SortConfig]) -> SortResult
"""

from enum import Enum
from typing import Callable, Dict, Optional, Union

from src.core.domain.disk_row import DiskRow
from src.core.domain.sort_result import SortResult
from src.sorting.alternating import sort_alternating
from src.sorting.config import SortConfig
from src.sorting.lawnmower import sort_lawnmower


class SortAlgorithm(str, Enum):
    """Алгоритм сортировки ряда дисков"""

    ALTERNATING = "alternating"
    LAWNMOWER = "lawnmower"


SortFunction = Callable[[DiskRow, Optional[SortConfig]], SortResult]

_ALGORITHMS: Dict[SortAlgorithm, SortFunction] = {
    SortAlgorithm.ALTERNATING: sort_alternating,
    SortAlgorithm.LAWNMOWER: sort_lawnmower,
}


def sort_disks(
    before: DiskRow,
    algorithm: Union[SortAlgorithm, str] = SortAlgorithm.ALTERNATING,
    config: Optional[SortConfig] = None,
) -> SortResult:
    """
    Сортировка выбранным алгоритмом.

    Args:
        before: Исходный ряд (не изменяется)
        algorithm: SortAlgorithm или его строковое значение
        config: Конфигурация алгоритма

    Returns:
        SortResult выбранного алгоритма

    Raises:
        ValueError: Неизвестный алгоритм
    """
    try:
        key = SortAlgorithm(algorithm)
    except ValueError:
        known = ", ".join(a.value for a in SortAlgorithm)
        raise ValueError(f"Unknown sort algorithm: {algorithm!r} (expected one of: {known})")

    return _ALGORITHMS[key](before, config)
