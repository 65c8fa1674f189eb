"""
DigitVector — упорядоченный набор колёс (slots), старший разряд первым.

Слоты хранятся в одном списке и адресуются по индексу; соседи
вычисляются через previous()/next(), без взаимных ссылок между слотами.
"""

from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional, Tuple

from src.numpicker.bounds import DIGIT_MAX, DIGIT_MIN, BoundDigits


@dataclass
class DigitSlot:
    """
    Одна десятичная позиция.

    position 0: старший разряд. min_bound_digit/max_bound_digit
    неизменяемы, value/live_min/live_max пересчитываются движком.
    """

    position: int
    min_bound_digit: int
    max_bound_digit: int
    default_digit: int = DIGIT_MIN

    value: int = DIGIT_MIN
    live_min: int = DIGIT_MIN
    live_max: int = DIGIT_MAX

    def set_live_bounds(self, live_min: int, live_max: int) -> None:
        """
        Установка live bounds с прижатием value в [live_min, live_max].

        Повторяет поведение колеса: сужение диапазона сдвигает значение.
        """
        self.live_min = live_min
        self.live_max = live_max
        self.value = min(max(self.value, live_min), live_max)

    @property
    def at_live_min(self) -> bool:
        return self.value == self.live_min

    @property
    def at_live_max(self) -> bool:
        return self.value == self.live_max


@dataclass
class DigitVector:
    """Вектор колёс одной сессии пикера."""

    slots: List[DigitSlot] = field(default_factory=list)
    # Количество младших слотов после десятичной точки
    decimal_point_index: int = 0

    @classmethod
    def from_bound_digits(cls, bound_digits: BoundDigits) -> "DigitVector":
        """
        Построение вектора из разложенных границ.

        Начальные live bounds: 0..9 везде, кроме позиции 0, которая
        ограничена своими bound digits (префикс старшего разряда пуст
        и всегда совпадает с обеими границами). Полное сужение выполняет
        boundary pass после seed.
        """
        slots = [
            DigitSlot(
                position=position,
                min_bound_digit=min_digit,
                max_bound_digit=max_digit,
                default_digit=default_digit,
                value=default_digit,
            )
            for position, (min_digit, max_digit, default_digit) in enumerate(
                zip(
                    bound_digits.min_bound_digits,
                    bound_digits.max_bound_digits,
                    bound_digits.default_slot_digits,
                )
            )
        ]
        vector = cls(slots=slots, decimal_point_index=bound_digits.decimal_point_index)
        vector.reset_live_bounds()
        return vector

    def reset_live_bounds(self) -> None:
        """Возврат live bounds к состоянию сразу после создания."""
        for slot in self.slots:
            if slot.position == 0:
                slot.set_live_bounds(slot.min_bound_digit, slot.max_bound_digit)
            else:
                slot.set_live_bounds(DIGIT_MIN, DIGIT_MAX)

    # ---------- NAVIGATION ----------

    def previous(self, slot: DigitSlot) -> Optional[DigitSlot]:
        """Слот position - 1 или None для старшего разряда."""
        if slot.position == 0:
            return None
        return self.slots[slot.position - 1]

    def next(self, slot: DigitSlot) -> Optional[DigitSlot]:
        """Слот position + 1 или None для младшего разряда."""
        if slot.position + 1 >= len(self.slots):
            return None
        return self.slots[slot.position + 1]

    # ---------- ACCESSORS ----------

    def __getitem__(self, position: int) -> DigitSlot:
        return self.slots[position]

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self) -> Iterator[DigitSlot]:
        return iter(self.slots)

    def values(self) -> Tuple[int, ...]:
        return tuple(slot.value for slot in self.slots)

    def live_bounds(self) -> Tuple[Tuple[int, int], ...]:
        return tuple((slot.live_min, slot.live_max) for slot in self.slots)

    def copy(self) -> "DigitVector":
        return DigitVector(
            slots=[replace(slot) for slot in self.slots],
            decimal_point_index=self.decimal_point_index,
        )
