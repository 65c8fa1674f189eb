"""
numpicker — ядро odometer-пикера числа в диапазоне [min_value, max_value].

Одно колесо на десятичный разряд; движок пропагации держит live bounds
каждого колеса согласованными, чтобы комбинированное значение никогда
не выходило из диапазона, и переносит +1 между соседними колёсами.
"""

from src.numpicker.assembler import assemble, boundary_pass, seed
from src.numpicker.bounds import (
    DECIMAL_SEPARATOR,
    DIGIT_MAX,
    DIGIT_MIN,
    FILLER_CHAR,
    BoundDigits,
    InvalidDefaultError,
    InvalidRangeError,
    PickerBounds,
    PickerConstructionError,
    decompose,
    render_digits,
)
from src.numpicker.contracts import dump_snapshot, load_snapshot, validate_snapshot
from src.numpicker.dialog import DialogConfig, NumberPickerDialog
from src.numpicker.digit_vector import DigitSlot, DigitVector
from src.numpicker.propagation import (
    apply_change,
    carry_up,
    check_max_boundary,
    check_min_boundary,
    propagate,
    release_suffix,
)
from src.numpicker.session import (
    PickerSession,
    SlotState,
    VectorSnapshot,
    create_vector,
    get_combined_value,
    on_slot_changed,
    reset,
    snapshot,
)

__all__ = [
    # Constants
    "DIGIT_MIN",
    "DIGIT_MAX",
    "FILLER_CHAR",
    "DECIMAL_SEPARATOR",
    # Bounds
    "PickerBounds",
    "BoundDigits",
    "decompose",
    "render_digits",
    # Exceptions
    "PickerConstructionError",
    "InvalidRangeError",
    "InvalidDefaultError",
    # Digit vector
    "DigitSlot",
    "DigitVector",
    # Propagation
    "apply_change",
    "propagate",
    "carry_up",
    "check_max_boundary",
    "check_min_boundary",
    "release_suffix",
    # Assembler
    "assemble",
    "seed",
    "boundary_pass",
    # Session
    "PickerSession",
    "SlotState",
    "VectorSnapshot",
    "create_vector",
    "on_slot_changed",
    "reset",
    "get_combined_value",
    "snapshot",
    # Dialog
    "DialogConfig",
    "NumberPickerDialog",
    # Contracts
    "validate_snapshot",
    "dump_snapshot",
    "load_snapshot",
]
