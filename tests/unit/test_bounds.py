"""
Тесты для Bounds — валидация диапазона и разложение границ по разрядам

Проверяемые инварианты:
1. InvalidRangeError при max_value < min_value
2. InvalidDefaultError при default вне диапазона
3. decimal_point = max масштабов границ без хвостовых нулей
4. min/default строки выровнены по длине max строки заполнителем
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.numpicker.bounds import (
    DIGIT_MAX,
    FILLER_CHAR,
    InvalidDefaultError,
    InvalidRangeError,
    PickerBounds,
    PickerConstructionError,
    decimal_scale,
    decompose,
    render_digits,
    slot_digits,
    to_decimal,
)


# =============================================================================
# ТЕСТЫ: Валидация диапазона
# =============================================================================


class TestPickerBoundsValidation:
    """Тесты from_range: ошибки создания."""

    def test_max_below_min_rejected(self):
        """max < min → InvalidRangeError."""
        with pytest.raises(InvalidRangeError, match="max_value must be larger"):
            PickerBounds.from_range(10.0, 5.0)

    def test_equal_bounds_allowed(self):
        """min == max: допустимый вырожденный диапазон."""
        bounds = PickerBounds.from_range(5, 5)
        assert bounds.min_value == bounds.max_value == Decimal("5")

    def test_default_above_max_rejected(self):
        with pytest.raises(InvalidDefaultError, match="default value must be between"):
            PickerBounds.from_range(0, 10, 11)

    def test_default_below_min_rejected(self):
        with pytest.raises(InvalidDefaultError):
            PickerBounds.from_range(0, 10, -1)

    def test_default_on_bounds_allowed(self):
        assert PickerBounds.from_range(0, 10, 0).default_value == Decimal("0")
        assert PickerBounds.from_range(0, 10, 10).default_value == Decimal("10")

    def test_construction_errors_share_base(self):
        """Обе ошибки наследуют PickerConstructionError (и ValueError)."""
        assert issubclass(InvalidRangeError, PickerConstructionError)
        assert issubclass(InvalidDefaultError, PickerConstructionError)
        assert issubclass(PickerConstructionError, ValueError)

    def test_nan_inf_rejected(self):
        with pytest.raises(ValueError, match="NaN/Inf"):
            PickerBounds.from_range(float("nan"), 10.0)

        with pytest.raises(ValueError, match="NaN/Inf"):
            PickerBounds.from_range(0.0, float("inf"))

    def test_non_numeric_string_rejected(self):
        with pytest.raises(ValueError, match="Not a number"):
            PickerBounds.from_range("abc", 10)

    def test_bounds_are_frozen(self):
        bounds = PickerBounds.from_range(0, 10)
        with pytest.raises(ValidationError):
            bounds.min_value = Decimal("1")


class TestPickerBoundsDerived:
    """Тесты вычисляемых полей: decimal_point и effective_default."""

    @pytest.mark.parametrize(
        "min_value, max_value, expected",
        [
            (0.0, 25.0, 0),
            (0.0, 9.5, 1),
            (18, 99, 0),
            (0, 100, 0),
            (1.25, 3.5, 2),
            (Decimal("0.50"), Decimal("2.0"), 1),
        ],
    )
    def test_decimal_point(self, min_value, max_value, expected):
        """decimal_point равен наибольшему масштабу границ без хвостовых нулей."""
        assert PickerBounds.from_range(min_value, max_value).decimal_point == expected

    def test_effective_default_falls_back_to_min(self):
        bounds = PickerBounds.from_range(3, 7)
        assert bounds.default_value is None
        assert bounds.effective_default == Decimal("3")

    def test_effective_default_uses_given_value(self):
        assert PickerBounds.from_range(3, 7, 5).effective_default == Decimal("5")


# =============================================================================
# ТЕСТЫ: Helpers
# =============================================================================


class TestHelpers:
    def test_float_converted_through_repr(self):
        """9.5 → Decimal('9.5'), 0.1 → Decimal('0.1') без двоичного шума."""
        assert to_decimal(9.5) == Decimal("9.5")
        assert to_decimal(0.1) == Decimal("0.1")

    def test_decimal_scale(self):
        assert decimal_scale(Decimal("100")) == -2
        assert decimal_scale(Decimal("9.50")) == 1
        assert decimal_scale(Decimal("0.0")) == 0

    @pytest.mark.parametrize(
        "value, decimal_point, expected",
        [
            (Decimal("9.5"), 1, "9.5"),
            (Decimal("0"), 2, "0.00"),
            (Decimal("100.0"), 0, "100"),
            (Decimal("25.0"), 0, "25"),
            (Decimal("2.5"), 0, "3"),
        ],
    )
    def test_render_digits(self, value, decimal_point, expected):
        assert render_digits(value, decimal_point) == expected

    def test_slot_digits_skips_separator_and_maps_filler(self):
        assert slot_digits("-0.50", "12.25", 0) == (0, 0, 5, 0)
        assert slot_digits("12.25", "12.25", DIGIT_MAX) == (1, 2, 2, 5)


# =============================================================================
# ТЕСТЫ: Bound Decomposer
# =============================================================================


class TestDecompose:
    """Тесты decompose: строки и bound digits по позициям."""

    def test_integer_range(self):
        digits = decompose(PickerBounds.from_range(0.0, 25.0))

        assert digits.max_digits == "25"
        assert digits.min_digits == FILLER_CHAR + "0"
        assert digits.max_bound_digits == (2, 5)
        assert digits.min_bound_digits == (0, 0)
        assert digits.default_slot_digits == (0, 0)
        assert digits.decimal_point_index == 0
        assert digits.slot_count == 2

    def test_short_min_padded_with_zero_digit(self):
        """min=8, max=25 → min "-8" → bound digits (0, 8)."""
        digits = decompose(PickerBounds.from_range(8, 25))

        assert digits.min_digits == "-8"
        assert digits.min_bound_digits == (0, 8)

    def test_decimal_range(self):
        """min=0.0, max=9.5 → два слота [ones, tenths]."""
        digits = decompose(PickerBounds.from_range(0.0, 9.5))

        assert digits.max_digits == "9.5"
        assert digits.min_digits == "0.0"
        assert digits.max_bound_digits == (9, 5)
        assert digits.min_bound_digits == (0, 0)
        assert digits.decimal_point_index == 1
        assert digits.slot_count == 2

    def test_default_digits(self):
        digits = decompose(PickerBounds.from_range(18, 99, 42))

        assert digits.default_digits == "42"
        assert digits.default_slot_digits == (4, 2)

    def test_mixed_length_decimal_range(self):
        digits = decompose(PickerBounds.from_range(0.5, 12.25, 3.75))

        assert digits.max_digits == "12.25"
        assert digits.min_digits == "-0.50"
        assert digits.default_digits == "-3.75"
        assert digits.max_bound_digits == (1, 2, 2, 5)
        assert digits.min_bound_digits == (0, 0, 5, 0)
        assert digits.default_slot_digits == (0, 3, 7, 5)
        assert digits.decimal_point_index == 2

    def test_trailing_zero_max_keeps_integer_digits(self):
        """max=100 → три позиции, хотя масштаб 100 отрицательный."""
        digits = decompose(PickerBounds.from_range(0, 100))

        assert digits.max_digits == "100"
        assert digits.max_bound_digits == (1, 0, 0)
        assert digits.min_bound_digits == (0, 0, 0)
