"""
SortResult: результат сортировки ряда дисков

Immutable пара (итоговый ряд, количество обменов).
Создаётся один раз алгоритмом сортировки и далее не меняется.
"""

from pydantic import BaseModel, Field

from src.core.domain.disk_row import DiskColor, DiskRow


class SortResult(BaseModel):
    """
    Результат алгоритма сортировки.

    Итоговый ряд хранится как кортеж цветов: final_row() каждый раз отдаёт
    новый DiskRow, поэтому мутация полученного ряда не затрагивает результат.
    """

    final_colors: tuple[DiskColor, ...] = Field(
        ..., description="Цвета итогового ряда в порядке индексов"
    )
    swap_count: int = Field(..., ge=0, description="Количество выполненных adjacent swaps")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def of(cls, row: DiskRow, swap_count: int) -> "SortResult":
        """
        Упаковка рабочей копии ряда в результат.

        Args:
            row: Итоговый ряд (рабочая копия алгоритма)
            swap_count: Количество обменов

        Returns:
            SortResult, независимый от row
        """
        return cls(final_colors=row.colors, swap_count=swap_count)

    def final_row(self) -> DiskRow:
        """Итоговый ряд (новый экземпляр на каждый вызов)"""
        return DiskRow._from_trusted(self.final_colors)
