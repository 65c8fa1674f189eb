"""
Session — внешний интерфейс ядра пикера для UI-хоста

Хост рисует по одному колесу на DigitSlot и вызывает on_slot_changed()
на каждое пользовательское изменение колеса, после чего читает обратно
(value, live_min, live_max) каждого слота.

Модель выполнения: однопоточная, синхронная. Каждый вызов завершает
пропагацию целиком до возврата; фоновой работы нет.

Функции модуля (create_vector, on_slot_changed, reset, get_combined_value)
работают с голым DigitVector; PickerSession владеет границами и вектором
одной сессии и добавляет snapshot() для чтения хостом.
"""

import logging
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from src.numpicker.assembler import assemble, boundary_pass, seed
from src.numpicker.bounds import NumberLike, PickerBounds, decompose, to_decimal
from src.numpicker.digit_vector import DigitVector
from src.numpicker.propagation import apply_change

logger = logging.getLogger(__name__)


# =============================================================================
# SNAPSHOT MODELS
# =============================================================================


class SlotState(BaseModel):
    """Состояние одного колеса для отображения хостом."""

    position: int = Field(..., ge=0)
    value: int = Field(..., ge=0, le=9)
    live_min: int = Field(..., ge=0, le=9)
    live_max: int = Field(..., ge=0, le=9)

    model_config = {"frozen": True}


class VectorSnapshot(BaseModel):
    """Снапшот вектора после прохода пропагации."""

    slots: List[SlotState] = Field(..., min_length=1)
    decimal_point_index: int = Field(..., ge=0)
    combined_value: float

    model_config = {"frozen": True}


# =============================================================================
# MODULE-LEVEL API
# =============================================================================


def create_vector(
    min_value: NumberLike,
    max_value: NumberLike,
    default_value: Optional[NumberLike] = None,
) -> DigitVector:
    """
    Создание вектора колёс для диапазона.

    Raises:
        InvalidRangeError: max_value < min_value
        InvalidDefaultError: default_value вне диапазона
    """
    bounds = PickerBounds.from_range(min_value, max_value, default_value)
    return build_vector(bounds)


def build_vector(bounds: PickerBounds) -> DigitVector:
    """Вектор из уже валидированных границ, с выполненным boundary pass."""
    vector = DigitVector.from_bound_digits(decompose(bounds))
    boundary_pass(vector)
    return vector


def on_slot_changed(vector: DigitVector, position: int, new_value: int) -> None:
    """
    Единственная интерактивная точка входа.

    Хост гарантирует, что new_value является допустимым локальным переходом колеса
    (шаг ±1 или собственный перекат колеса), а position лежит в пределах вектора.
    """
    apply_change(vector, position, new_value)


def reset(vector: DigitVector) -> None:
    """Возврат всех колёс к значениям по умолчанию + boundary pass."""
    for slot in vector:
        slot.value = slot.default_digit
    boundary_pass(vector)


def get_combined_value(vector: DigitVector) -> float:
    return assemble(vector)


def snapshot(vector: DigitVector) -> VectorSnapshot:
    return VectorSnapshot(
        slots=[
            SlotState(
                position=slot.position,
                value=slot.value,
                live_min=slot.live_min,
                live_max=slot.live_max,
            )
            for slot in vector
        ],
        decimal_point_index=vector.decimal_point_index,
        combined_value=assemble(vector),
    )


# =============================================================================
# SESSION
# =============================================================================


class PickerSession:
    """
    Одна сессия пикера: неизменяемые границы + изменяемый вектор.

    Вектор принадлежит только этой сессии и не разделяется с другими.
    """

    def __init__(self, bounds: PickerBounds):
        self.bounds = bounds
        self.vector = build_vector(bounds)
        logger.info(
            "picker session created: range=[%s, %s], default=%s, decimal_point=%d, slots=%d",
            bounds.min_value,
            bounds.max_value,
            bounds.effective_default,
            bounds.decimal_point,
            len(self.vector),
        )

    @classmethod
    def create(
        cls,
        min_value: NumberLike,
        max_value: NumberLike,
        default_value: Optional[NumberLike] = None,
    ) -> "PickerSession":
        return cls(PickerBounds.from_range(min_value, max_value, default_value))

    @property
    def slot_count(self) -> int:
        return len(self.vector)

    @property
    def default_value(self) -> Decimal:
        return self.bounds.effective_default

    def on_slot_changed(self, position: int, new_value: int) -> VectorSnapshot:
        on_slot_changed(self.vector, position, new_value)
        return self.snapshot()

    def set_value(self, value: NumberLike) -> VectorSnapshot:
        """
        Программная установка значения (seed + boundary pass).

        Raises:
            ValueError: Если value вне диапазона сессии
        """
        target = to_decimal(value)
        if target < self.bounds.min_value or target > self.bounds.max_value:
            raise ValueError(
                f"value {target} outside [{self.bounds.min_value}, {self.bounds.max_value}]"
            )
        seed(self.vector, target)
        return self.snapshot()

    def reset(self) -> VectorSnapshot:
        reset(self.vector)
        logger.info("picker session reset to %s", self.bounds.effective_default)
        return self.snapshot()

    def get_combined_value(self) -> float:
        return get_combined_value(self.vector)

    def snapshot(self) -> VectorSnapshot:
        return snapshot(self.vector)
