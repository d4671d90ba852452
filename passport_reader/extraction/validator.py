"""Validates a parsed service reply against the fixed passport schema."""

from typing import Any

from passport_reader.extraction.exceptions import SchemaError
from passport_reader.extraction.models import PASSPORT_FIELDS, PassportData


def validate_and_build(data: Any) -> PassportData:
    """Validate a parsed reply and build a PassportData.

    Every field key must be present with a string value. Empty strings are
    accepted, unknown keys are ignored.

    Raises:
        SchemaError: on any validation failure.
    """
    if not isinstance(data, dict):
        raise SchemaError("Passport data must be an object")
    _require_fields(data)
    values = {key: _build_value(data[key], key) for key in PASSPORT_FIELDS}
    return PassportData.from_dict(values)


def _require_fields(data: dict[str, Any]) -> None:
    missing = [key for key in PASSPORT_FIELDS if key not in data]
    if missing:
        raise SchemaError(f"Missing required field(s): {', '.join(missing)}")


def _build_value(raw: Any, key: str) -> str:
    if not isinstance(raw, str):
        raise SchemaError(f"'{key}' must be a string, got {type(raw).__name__}")
    return raw.strip()
