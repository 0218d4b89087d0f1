"""Typed access to record fields."""

from __future__ import annotations

from typing import Any, Mapping

from list_manager.errors import MissingFieldError

Record = Mapping[str, Any]

_MISSING = object()


def record_value(record: Record, field: str) -> Any:
    """
    Return the value of `field` in `record`

    Raises:
        MissingFieldError: if the record has no such key
    """
    value = record.get(field, _MISSING) if isinstance(record, Mapping) else _MISSING
    if value is _MISSING:
        raise MissingFieldError(field)
    return value


def field_value(record: Record, field: str, default: Any = None) -> Any:
    """Like `record_value` but returns `default` for a missing field."""
    try:
        return record_value(record, field)
    except MissingFieldError:
        return default


def coerce_to_text(value: Any) -> str:
    """
    Coerce a scalar the way a loosely-typed string compare would see it:
    None -> "", True -> "1", False -> "", 2.0 -> "2".
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
