"""
Value Assembler — сборка float из вектора колёс и обратное заполнение.

assemble(): цифры старшим разрядом вперёд, десятичная точка на
decimal_point_index позиций от младшего разряда.
seed(): значение → цифры слотов + boundary pass.
"""

from decimal import Decimal
from typing import Union

from src.numpicker.bounds import (
    DECIMAL_SEPARATOR,
    DIGIT_MIN,
    align_digits,
    render_digits,
    to_decimal,
)
from src.numpicker.digit_vector import DigitVector
from src.numpicker.propagation import check_max_boundary, check_min_boundary


def assemble_text(vector: DigitVector) -> str:
    """Строковое представление вектора ("09.5" для [0, 9, 5], dpi=1)."""
    digits = "".join(str(slot.value) for slot in vector)
    if vector.decimal_point_index == 0:
        return digits
    split = len(digits) - vector.decimal_point_index
    return digits[:split] + DECIMAL_SEPARATOR + digits[split:]


def assemble(vector: DigitVector) -> float:
    """
    Комбинированное значение вектора.

    Examples:
        [2, 5], dpi=0 → 25.0
        [9, 5], dpi=1 → 9.5
    """
    return float(assemble_text(vector))


def boundary_pass(vector: DigitVector) -> None:
    """
    Полный проход по границам после seed/reset.

    live bounds возвращаются к начальному состоянию, затем для каждого
    слота по возрастанию позиции выполняются max- и min-boundary проверки.
    """
    vector.reset_live_bounds()
    for slot in vector:
        if check_max_boundary(vector, slot):
            check_min_boundary(vector, slot)


def seed(vector: DigitVector, value: Union[float, Decimal]) -> None:
    """
    Заполнение слотов цифрами value.

    value рендерится с точностью вектора и выравнивается вправо по числу
    позиций; нецифровые символы дают 0.
    """
    text = render_digits(to_decimal(value), vector.decimal_point_index)
    width = len(vector) + (1 if vector.decimal_point_index else 0)
    digits = [
        int(char) if char.isdigit() else DIGIT_MIN
        for char in align_digits(text, width)
        if char != DECIMAL_SEPARATOR
    ]

    for slot, digit in zip(vector, digits):
        slot.value = digit

    boundary_pass(vector)
