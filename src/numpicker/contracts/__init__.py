"""
Contract Validation Module

Валидация JSON контрактов, которыми ядро пикера обменивается с хостом.
"""

from .validators import (
    SnapshotValidator,
    dump_snapshot,
    load_schema,
    load_snapshot,
    validate_snapshot,
)

__all__ = [
    # Classes
    "SnapshotValidator",
    # Functions
    "load_schema",
    "validate_snapshot",
    "dump_snapshot",
    "load_snapshot",
]
