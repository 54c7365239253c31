"""
DiskRow: ряд дисков двух цветов

Модель ряда из 2n дисков (LIGHT/DARK) с единственной мутирующей операцией:
обмен двух соседних дисков (adjacent swap).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. total_count всегда чётный и положительный (2n, n >= 1), длина не меняется
2. light_count == dark_count == n на всём жизненном цикле ряда
   (swap только переставляет существующие значения, мультимножество цветов
   неизменно)
3. Ошибочный индекс → IndexOutOfRange, до любой мутации
4. Цвета хранятся в приватном списке, снаружи доступны только как кортеж

Формат render(): токены "L"/"D" в порядке индексов через один пробел.
Формат используется в тестах и диагностике буквально.
"""

from enum import Enum
from typing import Iterable, Union

from pydantic import BaseModel, PrivateAttr, TypeAdapter, ValidationError


# =============================================================================
# ENUMS
# =============================================================================


class DiskColor(str, Enum):
    """Цвет диска (значение совпадает с токеном render())"""

    LIGHT = "L"
    DARK = "D"


# Приведение входной последовательности ("L"/"D" или DiskColor) к list[DiskColor]
_COLORS_ADAPTER = TypeAdapter(list[DiskColor])


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConstructionError(ValueError):
    """
    Невалидные параметры создания ряда.

    Возникает при light_count <= 0, а также при создании ряда из явной
    последовательности цветов с нарушенной структурой (пустой ряд, нечётная
    длина, разное количество LIGHT/DARK, неизвестный токен).
    """

    pass


class IndexOutOfRange(IndexError):
    """Обращение get/swap по индексу вне [0, total_count)."""

    pass


# =============================================================================
# DISK ROW MODEL
# =============================================================================


class DiskRow(BaseModel):
    """
    Упорядоченный ряд дисков фиксированной длины.

    Сравнение по значению: два ряда равны, если совпадают длина и цвет
    на каждой позиции.

    Ряд мутабелен только через swap(): список цветов приватный, свойство
    colors отдаёт кортеж. Алгоритмы сортировки работают с приватной копией
    (clone()), исходный ряд вызывающей стороны не меняется.
    """

    _colors: list[DiskColor] = PrivateAttr(default_factory=list)

    # Ряд мутабелен через swap(), поэтому не hashable
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, colors: Iterable[Union[DiskColor, str]]) -> None:
        """
        Ряд из явной последовательности цветов.

        Args:
            colors: DiskColor или токены "L"/"D" в порядке индексов

        Raises:
            ConstructionError: Если последовательность не образует валидный ряд
        """
        super().__init__()
        try:
            validated = _COLORS_ADAPTER.validate_python(list(colors))
        except ValidationError as e:
            raise ConstructionError(f"Invalid disk row: {e}") from e
        self._colors = self._check_balanced(validated)

    @staticmethod
    def _check_balanced(colors: list[DiskColor]) -> list[DiskColor]:
        """Ряд непустой, чётной длины, LIGHT и DARK поровну"""
        if not colors:
            raise ConstructionError("Invalid disk row: disk row must not be empty")
        if len(colors) % 2 != 0:
            raise ConstructionError(
                f"Invalid disk row: length must be even, got {len(colors)}"
            )

        light = sum(1 for color in colors if color == DiskColor.LIGHT)
        dark = len(colors) - light
        if light != dark:
            raise ConstructionError(
                f"Invalid disk row: must hold equal light and dark counts, "
                f"got light={light} dark={dark}"
            )
        return colors

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, light_count: int) -> "DiskRow":
        """
        Ряд из 2 * light_count дисков в исходной чередующейся раскладке.

        Args:
            light_count: Количество светлых дисков n (n >= 1)

        Returns:
            Ряд вида "L D L D ..." длины 2n

        Raises:
            ConstructionError: Если light_count не положительное целое

        Examples:
            >>> DiskRow.create(2).render()
            'L D L D'
        """
        # bool является подклассом int, но не количеством дисков
        if isinstance(light_count, bool) or not isinstance(light_count, int):
            raise ConstructionError(
                f"light_count must be a positive integer, got {light_count!r}"
            )
        if light_count <= 0:
            raise ConstructionError(f"light_count must be positive, got {light_count}")

        return cls(
            DiskColor.LIGHT if i % 2 == 0 else DiskColor.DARK
            for i in range(light_count * 2)
        )

    @classmethod
    def from_colors(cls, colors: Iterable[Union[DiskColor, str]]) -> "DiskRow":
        """Ряд из явной последовательности цветов (DiskColor или "L"/"D")"""
        return cls(colors)

    @classmethod
    def parse(cls, text: str) -> "DiskRow":
        """
        Обратная операция к render().

        Examples:
            >>> DiskRow.parse("L L D D").is_sorted()
            True
        """
        return cls(text.split())

    @classmethod
    def _from_trusted(cls, colors: Iterable[DiskColor]) -> "DiskRow":
        """Ряд из уже проверенных цветов (без повторной валидации)"""
        row = cls.model_construct()
        row._colors = list(colors)
        return row

    def clone(self) -> "DiskRow":
        """Независимая копия ряда (мутации копии не видны в оригинале)"""
        return self._from_trusted(self._colors)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def colors(self) -> tuple[DiskColor, ...]:
        """Цвета дисков в порядке индексов (read-only снимок)"""
        return tuple(self._colors)

    def total_count(self) -> int:
        return len(self._colors)

    def light_count(self) -> int:
        return sum(1 for color in self._colors if color == DiskColor.LIGHT)

    def dark_count(self) -> int:
        return sum(1 for color in self._colors if color == DiskColor.DARK)

    def is_index(self, index: int) -> bool:
        """True если 0 <= index < total_count()"""
        return 0 <= index < self.total_count()

    def get(self, index: int) -> DiskColor:
        """
        Цвет диска на позиции index.

        Отрицательные индексы не поддерживаются (без wrap-around).

        Raises:
            IndexOutOfRange: Если index вне ряда
        """
        if not self.is_index(index):
            raise IndexOutOfRange(
                f"index {index} out of range for row of {self.total_count()} disks"
            )
        return self._colors[index]

    def swap(self, left_index: int) -> None:
        """
        Обмен дисков на позициях left_index и left_index + 1.

        Обе позиции проверяются до мутации: при ошибке ряд не меняется.

        Raises:
            IndexOutOfRange: Если left_index или left_index + 1 вне ряда
        """
        right_index = left_index + 1
        if not self.is_index(left_index) or not self.is_index(right_index):
            raise IndexOutOfRange(
                f"cannot swap at {left_index}: pair ({left_index}, {right_index}) "
                f"out of range for row of {self.total_count()} disks"
            )
        self._colors[left_index], self._colors[right_index] = (
            self._colors[right_index],
            self._colors[left_index],
        )

    # -------------------------------------------------------------------------
    # -------------------------------------------------------------------------
    # Shape predicates
    # -------------------------------------------------------------------------

    def is_initialized(self) -> bool:
        """
        Исходная раскладка: чётные позиции LIGHT, нечётные DARK.

        Returns:
            True если ряд имеет вид "L D L D ..."
        """
        for i, color in enumerate(self._colors):
            expected = DiskColor.LIGHT if i % 2 == 0 else DiskColor.DARK
            if color != expected:
                return False
        return True

    def is_sorted(self) -> bool:
        """
        Целевая раскладка: позиции [0, n) LIGHT, позиции [n, 2n) DARK.

        Returns:
            True если ряд имеет вид "L ... L D ... D"
        """
        half = self.total_count() // 2
        if any(color == DiskColor.DARK for color in self._colors[:half]):
            return False
        if any(color == DiskColor.LIGHT for color in self._colors[half:]):
            return False
        return True

    def render(self) -> str:
        """Текстовая форма: "L"/"D" через пробел, в порядке индексов"""
        return " ".join(color.value for color in self._colors)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"DiskRow({self.render()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiskRow):
            return NotImplemented
        return self._colors == other._colors
