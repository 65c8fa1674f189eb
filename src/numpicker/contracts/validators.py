"""
JSON Schema Contract Validators

Снапшот колёс, которым ядро обменивается с хостом после каждого изменения
(value, live_min, live_max на слот + комбинированное значение).
Хост получает JSON через dump_snapshot и может вернуть его через
load_snapshot; оба направления проходят валидацию по picker_snapshot.json.
Использует библиотеку jsonschema.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator

from src.numpicker.session import VectorSnapshot

SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "picker_snapshot.json"


def load_schema(path: Path = SCHEMA_PATH) -> Dict[str, Any]:
    """
    Загрузка JSON Schema снапшота.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема сама по себе невалидна
    """
    if not path.exists():
        raise FileNotFoundError(f"Schema not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e}")

    return schema


# =============================================================================
# SNAPSHOT VALIDATOR
# =============================================================================


class SnapshotValidator:
    """Валидатор для picker_snapshot контракта."""

    def __init__(self, schema: Optional[Dict[str, Any]] = None):
        self.schema = schema if schema is not None else load_schema()
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Проверка схемы и live_min <= value <= live_max для каждого слота
        (JSON Schema не сравнивает поля между собой).

        Raises:
            ValidationError: Если данные не соответствуют контракту
        """
        self.validator.validate(data)

        for slot in data["slots"]:
            if not slot["live_min"] <= slot["value"] <= slot["live_max"]:
                raise jsonschema.ValidationError(
                    f"slot {slot['position']}: value {slot['value']} outside "
                    f"live bounds [{slot['live_min']}, {slot['live_max']}]"
                )

    def is_valid(self, data: Dict[str, Any]) -> bool:
        try:
            self.validate(data)
        except jsonschema.ValidationError:
            return False
        return True

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        """Все нарушения схемы (без проверки live bounds)."""
        return self.validator.iter_errors(data)


_VALIDATOR = SnapshotValidator()


def validate_snapshot(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    _VALIDATOR.validate(data)


# =============================================================================
# HOST EXCHANGE
# =============================================================================


def dump_snapshot(snapshot: VectorSnapshot) -> str:
    """Сериализация снапшота для хоста; невалидный снапшот не уходит наружу."""
    data = snapshot.model_dump(mode="json")
    validate_snapshot(data)
    return json.dumps(data)


def load_snapshot(text: str) -> VectorSnapshot:
    """
    Разбор снапшота, полученного от хоста.

    Raises:
        ValidationError: Если JSON не соответствует контракту
        json.JSONDecodeError: Если text не является JSON
    """
    data = json.loads(text)
    validate_snapshot(data)
    return VectorSnapshot.model_validate(data)
