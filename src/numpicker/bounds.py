"""
Bounds — Диапазон пикера и разложение границ по разрядам

Модуль отвечает за всё, что вычисляется один раз при создании пикера:
- Валидация диапазона [min_value, max_value] и значения по умолчанию
- Вычисление точности (decimal_point) по масштабам границ
- Рендер границ в строки цифр и разложение на bound digits по позициям

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. min_value <= max_value (иначе InvalidRangeError)
2. default_value ∈ [min_value, max_value] (иначе InvalidDefaultError)
3. min/default строки выровнены по длине строки max_value
4. Bound digits неизменяемы на всё время сессии
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Final, Optional, Tuple, Union

from pydantic import BaseModel, Field

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Диапазон одного колеса
DIGIT_MIN: Final[int] = 0
DIGIT_MAX: Final[int] = 9

# Заполнитель для выравнивания min/default строк по длине max строки.
# Позиция с заполнителем даёт цифру 0.
FILLER_CHAR: Final[str] = "-"

DECIMAL_SEPARATOR: Final[str] = "."

NumberLike = Union[float, int, Decimal, str]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PickerConstructionError(ValueError):
    """Ошибка создания пикера. Частичный вектор не создаётся."""


class InvalidRangeError(PickerConstructionError):
    """max_value < min_value."""


class InvalidDefaultError(PickerConstructionError):
    """default_value вне [min_value, max_value]."""


# =============================================================================
# HELPERS
# =============================================================================


def to_decimal(value: NumberLike) -> Decimal:
    """
    Конверсия входного числа в Decimal.

    float конвертируется через repr, поэтому 9.5 → Decimal("9.5"),
    а не двоичное представление 9.4999...

    Raises:
        ValueError: NaN/Inf или нечисловая строка
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(repr(value))
    else:
        try:
            result = Decimal(str(value))
        except ArithmeticError as e:
            raise ValueError(f"Not a number: {value!r}") from e

    if not result.is_finite():
        raise ValueError(f"NaN/Inf is not a valid bound: {value!r}")
    return result


def decimal_scale(value: Decimal) -> int:
    """Масштаб числа без хвостовых нулей (100 → -2, 9.50 → 1)."""
    return -value.normalize().as_tuple().exponent


def render_digits(value: Decimal, decimal_point: int) -> str:
    """
    Рендер числа с ровно decimal_point дробными цифрами.

    Для decimal_point == 0 хвостовые нули после запятой отбрасываются
    (25.0 → "25"). Значения с большим масштабом округляются ROUND_HALF_UP.

    Examples:
        >>> render_digits(Decimal("9.5"), 1)
        '9.5'
        >>> render_digits(Decimal("0"), 2)
        '0.00'
        >>> render_digits(Decimal("100.0"), 0)
        '100'
    """
    quantum = Decimal(1).scaleb(-decimal_point)
    return format(value.quantize(quantum, rounding=ROUND_HALF_UP), "f")


def align_digits(text: str, width: int) -> str:
    """Выравнивание строки вправо до width с заполнителем FILLER_CHAR."""
    return text.rjust(width, FILLER_CHAR)


def _char_to_digit(char: str, fallback: int) -> int:
    return int(char) if char.isdigit() else fallback


# =============================================================================
# BOUNDS MODEL
# =============================================================================


class PickerBounds(BaseModel):
    """
    Неизменяемый диапазон одной сессии пикера.

    Создаётся через from_range(), который выполняет валидацию границ
    и вычисляет decimal_point.
    """

    min_value: Decimal = Field(..., description="Нижняя граница (включительно)")
    max_value: Decimal = Field(..., description="Верхняя граница (включительно)")
    default_value: Optional[Decimal] = Field(
        None, description="Значение по умолчанию (None → min_value)"
    )
    decimal_point: int = Field(..., ge=0, description="Количество дробных цифр")

    model_config = {"frozen": True}

    @classmethod
    def from_range(
        cls,
        min_value: NumberLike,
        max_value: NumberLike,
        default_value: Optional[NumberLike] = None,
    ) -> "PickerBounds":
        """
        Валидация и создание границ.

        Args:
            min_value: Нижняя граница
            max_value: Верхняя граница
            default_value: Начальное значение (опционально)

        Returns:
            PickerBounds

        Raises:
            InvalidRangeError: Если max_value < min_value
            InvalidDefaultError: Если default_value вне диапазона
        """
        lo = to_decimal(min_value)
        hi = to_decimal(max_value)

        if hi < lo:
            raise InvalidRangeError(
                f"max_value must be larger than min_value: min={lo}, max={hi}"
            )

        default = None
        if default_value is not None:
            default = to_decimal(default_value)
            if default < lo or default > hi:
                raise InvalidDefaultError(
                    f"default value must be between min_value and max_value: "
                    f"default={default}, range=[{lo}, {hi}]"
                )

        decimal_point = max(0, decimal_scale(lo), decimal_scale(hi))

        return cls(
            min_value=lo,
            max_value=hi,
            default_value=default,
            decimal_point=decimal_point,
        )

    @property
    def effective_default(self) -> Decimal:
        if self.default_value is None:
            return self.min_value
        return self.default_value


# =============================================================================
# BOUND DECOMPOSER
# =============================================================================


@dataclass(frozen=True)
class BoundDigits:
    """Результат разложения границ по позициям (без десятичной точки)."""

    max_digits: str
    min_digits: str
    default_digits: str
    decimal_point_index: int

    max_bound_digits: Tuple[int, ...]
    min_bound_digits: Tuple[int, ...]
    default_slot_digits: Tuple[int, ...]

    @property
    def slot_count(self) -> int:
        return len(self.max_bound_digits)


def slot_digits(text: str, template: str, fallback: int) -> Tuple[int, ...]:
    """
    Цифры text для каждой цифровой позиции template.

    Позиции, где в template стоит DECIMAL_SEPARATOR, пропускаются.
    Нецифровые символы text (заполнитель, знак) дают fallback.
    """
    return tuple(
        _char_to_digit(char, fallback)
        for char, slot_char in zip(text, template)
        if slot_char != DECIMAL_SEPARATOR
    )


def decompose(bounds: PickerBounds) -> BoundDigits:
    """
    Разложение границ на bound digits.

    Строка max_value задаёт число позиций; min и default выравниваются
    по ней вправо заполнителем.

    Examples:
        min=8, max=25 → max "25", min "-8" → min bound digits (0, 8)
        min=0.0, max=9.5 → max "9.5", min "0.0" → 2 slots, decimal_point_index 1
    """
    max_digits = render_digits(bounds.max_value, bounds.decimal_point)
    width = len(max_digits)
    min_digits = align_digits(
        render_digits(bounds.min_value, bounds.decimal_point), width
    )
    default_digits = align_digits(
        render_digits(bounds.effective_default, bounds.decimal_point), width
    )

    return BoundDigits(
        max_digits=max_digits,
        min_digits=min_digits,
        default_digits=default_digits,
        decimal_point_index=bounds.decimal_point,
        max_bound_digits=slot_digits(max_digits, max_digits, DIGIT_MAX),
        min_bound_digits=slot_digits(min_digits, max_digits, DIGIT_MIN),
        default_slot_digits=slot_digits(default_digits, max_digits, DIGIT_MIN),
    )
