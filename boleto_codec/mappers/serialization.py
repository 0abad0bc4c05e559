"""Shared serialization utilities for payloads and sinks."""

from dataclasses import asdict, fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable

from boleto_codec.models.derived import DerivedField


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization.

    Derived slots are read without deep copying, so an unset slot
    serializes as ``None``.
    """
    result = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if isinstance(value, DerivedField):
            result[f.name] = serialize_value(value.value)
        elif is_dataclass(value):
            result[f.name] = serialize_value(asdict(value))
        else:
            result[f.name] = serialize_value(value)
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, DerivedField):
        return serialize_value(value.value)
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def is_empty(value: Any) -> bool:
    """True for ``None``, blank strings and empty containers."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def compact(pairs: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Build a dict from ``(key, value)`` pairs, dropping empty values.

    Insertion order follows ``pairs``.
    """
    return {key: value for key, value in pairs if not is_empty(value)}
