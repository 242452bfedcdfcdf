"""Typed readers for loosely shaped JSON objects."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from .errors import ChapaDecodeError

JsonObject = Mapping[str, object]


def _field_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def as_object(value: object, *, path: str) -> JsonObject:
    if not isinstance(value, Mapping):
        raise ChapaDecodeError(f"{path} must be an object", field=path)
    return value


def as_list(value: object, *, path: str) -> list[object]:
    if not isinstance(value, list):
        raise ChapaDecodeError(f"{path} must be a list", field=path)
    return value


def read_str(obj: JsonObject, key: str, *, path: str = "") -> str | None:
    value = obj.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # Reference ids are sometimes sent as bare numbers.
    if _is_number(value):
        return str(value)
    field = _field_path(path, key)
    raise ChapaDecodeError(f"{field} must be a string", field=field)


def read_float(obj: JsonObject, key: str, *, path: str = "") -> float | None:
    value = obj.get(key)
    if value is None:
        return None
    if _is_number(value):
        return float(value)
    field = _field_path(path, key)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            raise ChapaDecodeError(f"{field} is not a valid number", field=field) from None
    raise ChapaDecodeError(f"{field} must be a number", field=field)


def read_int(obj: JsonObject, key: str, *, path: str = "") -> int | None:
    value = obj.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    field = _field_path(path, key)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return int(text)
        raise ChapaDecodeError(f"{field} is not a valid integer", field=field)
    raise ChapaDecodeError(f"{field} must be an integer", field=field)


def read_datetime(obj: JsonObject, key: str, *, path: str = "") -> datetime | None:
    text = read_str(obj, key, path=path)
    if text is None or text.strip() == "":
        return None
    try:
        return datetime.fromisoformat(text.strip())
    except ValueError:
        field = _field_path(path, key)
        raise ChapaDecodeError(f"{field} is not an ISO-8601 timestamp", field=field) from None


def read_object(obj: JsonObject, key: str, *, path: str = "") -> JsonObject | None:
    value = obj.get(key)
    if value is None:
        return None
    return as_object(value, path=_field_path(path, key))


def read_list(obj: JsonObject, key: str, *, path: str = "") -> list[object]:
    value = obj.get(key)
    if value is None:
        return []
    return as_list(value, path=_field_path(path, key))


__all__ = [
    "JsonObject",
    "as_object",
    "as_list",
    "read_str",
    "read_float",
    "read_int",
    "read_datetime",
    "read_object",
    "read_list",
]
