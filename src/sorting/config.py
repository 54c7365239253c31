"""Конфигурация алгоритмов сортировки и проверка post-condition."""

import logging
from dataclasses import dataclass
from typing import Optional

from src.core.domain.disk_row import DiskRow

logger = logging.getLogger(__name__)


class SortPostconditionViolation(Exception):
    """
    Итоговый ряд не отсортирован.

    Возникает только при SortConfig.verify_sorted=True.
    """

    pass


@dataclass(frozen=True)
class SortConfig:
    """Конфигурация алгоритмов сортировки.

    - verify_sorted: проверять is_sorted() итогового ряда, иначе
      SortPostconditionViolation
    - max_double_passes: лимит double-pass для lawnmower
      (None → ceil(n / 2)); alternating его не использует
    """
    verify_sorted: bool = False
    max_double_passes: Optional[int] = None

    def __post_init__(self):
        if self.max_double_passes is not None and self.max_double_passes < 0:
            raise ValueError(
                f"max_double_passes must be non-negative, got {self.max_double_passes}"
            )


def check_sorted(row: DiskRow, algorithm: str, config: SortConfig) -> None:
    """Post-condition: при verify_sorted итоговый ряд обязан быть отсортирован."""
    if not config.verify_sorted:
        return

    if not row.is_sorted():
        logger.error(f"{algorithm}: final row is not sorted: {row.render()}")
        raise SortPostconditionViolation(
            f"{algorithm} finished with unsorted row: {row.render()}"
        )
