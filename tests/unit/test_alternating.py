"""
Тесты для alternating-pass sort

Проверяет:
1. Сортировку исходного ряда для n = 1..40 (post-condition is_sorted)
2. Конкретные сценарии n=1, n=2, n=3
3. Idempotence на отсортированном ряду
4. Отсутствие мутации исходного ряда
5. Вырожденный пустой ряд
6. verify_sorted и логирование
"""

import logging

import pytest

from src.core.domain import DiskRow
from src.sorting import SortConfig, SortPostconditionViolation, sort_alternating


class TestSortAlternating:
    """Тесты для sort_alternating"""

    @pytest.mark.parametrize("light_count", range(1, 41))
    def test_sorts_initialized_row(self, light_count: int) -> None:
        """Исходный ряд любого n сортируется, swap_count = n(n-1)/2"""
        result = sort_alternating(DiskRow.create(light_count))

        final = result.final_row()
        assert final.is_sorted()
        assert final.light_count() == light_count
        assert final.dark_count() == light_count
        assert result.swap_count == light_count * (light_count - 1) // 2

    def test_single_pair_needs_no_swaps(self) -> None:
        """n=1: "L D" уже отсортирован"""
        result = sort_alternating(DiskRow.create(1))
        assert result.final_row().render() == "L D"
        assert result.swap_count == 0

    def test_two_pairs(self) -> None:
        """n=2: "L D L D" → "L L D D" за один обмен"""
        result = sort_alternating(DiskRow.create(2))
        assert result.final_row().render() == "L L D D"
        assert result.swap_count == 1

    def test_three_pairs(self) -> None:
        """n=3: "L D L D L D" → "L L L D D D" за три обмена"""
        result = sort_alternating(DiskRow.create(3))
        assert result.final_row().render() == "L L L D D D"
        assert result.swap_count == 3

    @pytest.mark.parametrize("text", ["L D", "L L D D", "L L L L D D D D"])
    def test_sorted_row_is_unchanged(self, text: str) -> None:
        """Idempotence: отсортированный ряд → 0 обменов, ряд не меняется"""
        row = DiskRow.parse(text)
        result = sort_alternating(row)
        assert result.swap_count == 0
        assert result.final_row() == row

    def test_input_row_not_mutated(self) -> None:
        """Исходный ряд вызывающей стороны не меняется"""
        row = DiskRow.create(5)
        sort_alternating(row)
        assert row.is_initialized()
        assert row == DiskRow.create(5)

    def test_empty_row_returns_zero_swaps(self) -> None:
        """Пустой ряд (в обход валидации) → 0 обменов без проходов"""
        row = DiskRow.model_construct()
        result = sort_alternating(row)
        assert result.swap_count == 0
        assert result.final_colors == ()

    def test_verify_sorted_passes_for_initialized_row(self) -> None:
        """verify_sorted не мешает корректному результату"""
        result = sort_alternating(DiskRow.create(6), SortConfig(verify_sorted=True))
        assert result.final_row().is_sorted()

    def test_verify_sorted_detects_unsorted_result(self) -> None:
        """
        Brick-wall с n + 1 проходами рассчитан на исходную раскладку:
        обратный ряд "D D L L" за 3 прохода не сортируется
        """
        row = DiskRow.parse("D D L L")

        result = sort_alternating(row)
        assert result.final_row().render() == "L D L D"
        assert result.swap_count == 3

        with pytest.raises(SortPostconditionViolation, match="alternating"):
            sort_alternating(row, SortConfig(verify_sorted=True))

    def test_logs_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        """Итог сортировки логируется на уровне INFO"""
        with caplog.at_level(logging.INFO, logger="src.sorting.alternating"):
            sort_alternating(DiskRow.create(2))

        assert "alternating sort: n=2, passes=3, swaps=1" in caplog.text

    def test_debug_pass_log_formats_lazily(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Проход логируется на DEBUG, ряд форматируется только при выводе записи"""
        with caplog.at_level(logging.DEBUG, logger="src.sorting.alternating"):
            sort_alternating(DiskRow.create(2))

        debug_records = [r for r in caplog.records if r.levelno == logging.DEBUG]
        assert len(debug_records) == 3
        assert all("%s" in r.msg for r in debug_records)
        assert debug_records[1].getMessage() == "alternating pass 1/2: 1 swaps -> L L D D"

    def test_no_debug_records_at_info(self, caplog: pytest.LogCaptureFixture) -> None:
        """На уровне INFO записи о проходах не создаются"""
        with caplog.at_level(logging.INFO, logger="src.sorting.alternating"):
            sort_alternating(DiskRow.create(3))

        assert not [r for r in caplog.records if r.levelno == logging.DEBUG]
