"""Core response envelope models.

Every Chapa endpoint answers with the same loose wrapper::

    {"message": ..., "status": "success" | "failed", "data": ...}

but failure bodies omit different subsets of those fields, ``message`` may be
a string, an object of validation errors or a list, and the HTTP status code
does not reliably tell success from failure. The envelope below absorbs all of
that: ``message`` is kept as raw JSON, a missing ``status`` becomes
``"Unspecified"`` and a missing or null ``data`` becomes ``None``.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .errors import ChapaDecodeError

JsonValue = str | int | float | bool | None | list["JsonValue"] | dict[str, "JsonValue"]

UNSPECIFIED_STATUS = "Unspecified"
SUCCESS_STATUS = "success"

DataT = TypeVar("DataT")
MetaT = TypeVar("MetaT")


def message_to_text(message: object) -> str:
    if message is None:
        return ""
    if isinstance(message, str):
        return message.strip()
    if isinstance(message, Mapping):
        parts: list[str] = []
        for key, value in message.items():
            if isinstance(value, list):
                text = ", ".join(str(item) for item in value)
            else:
                text = str(value)
            parts.append(f"{key}: {text}")
        return "; ".join(parts)
    if isinstance(message, list):
        return "; ".join(message_to_text(item) for item in message)
    return json.dumps(message)


@dataclass(slots=True, frozen=True)
class ChapaResponse(Generic[DataT]):
    message: JsonValue = None
    status: str = UNSPECIFIED_STATUS
    data: DataT | None = None
    http_status: int | None = field(default=None, compare=False)

    @property
    def has_data(self) -> bool:
        return self.data is not None

    @property
    def is_success(self) -> bool:
        """True when the remote reported success and returned data."""
        return self.status.lower() == SUCCESS_STATUS and self.data is not None

    @property
    def message_text(self) -> str:
        return message_to_text(self.message)

    @property
    def validation_errors(self) -> dict[str, tuple[str, ...]]:
        if not isinstance(self.message, Mapping):
            return {}
        errors: dict[str, tuple[str, ...]] = {}
        for key, value in self.message.items():
            if isinstance(value, list):
                errors[str(key)] = tuple(str(item) for item in value)
            else:
                errors[str(key)] = (str(value),)
        return errors


@dataclass(slots=True, frozen=True)
class ChapaResponseWithMeta(ChapaResponse[DataT], Generic[DataT, MetaT]):
    meta: MetaT | None = None

    @property
    def has_meta(self) -> bool:
        return self.meta is not None


def decode_status(payload: Mapping[str, object]) -> str:
    raw = payload.get("status")
    if raw is None:
        return UNSPECIFIED_STATUS
    if not isinstance(raw, str):
        raise ChapaDecodeError("status must be a string", field="status")
    return raw


def decode_optional(
    payload: Mapping[str, object],
    key: str,
    parse: Callable[[object], DataT],
) -> DataT | None:
    raw = payload.get(key)
    if raw is None:
        return None
    return parse(raw)


def decode_envelope(
    payload: Mapping[str, object],
    parse_data: Callable[[object], DataT],
    *,
    http_status: int | None = None,
) -> ChapaResponse[DataT]:
    return ChapaResponse(
        message=payload.get("message"),
        status=decode_status(payload),
        data=decode_optional(payload, "data", parse_data),
        http_status=http_status,
    )


def decode_envelope_with_meta(
    payload: Mapping[str, object],
    parse_data: Callable[[object], DataT],
    parse_meta: Callable[[object], MetaT],
    *,
    http_status: int | None = None,
) -> ChapaResponseWithMeta[DataT, MetaT]:
    return ChapaResponseWithMeta(
        message=payload.get("message"),
        status=decode_status(payload),
        data=decode_optional(payload, "data", parse_data),
        meta=decode_optional(payload, "meta", parse_meta),
        http_status=http_status,
    )


__all__ = [
    "JsonValue",
    "UNSPECIFIED_STATUS",
    "SUCCESS_STATUS",
    "ChapaResponse",
    "ChapaResponseWithMeta",
    "message_to_text",
    "decode_status",
    "decode_optional",
    "decode_envelope",
    "decode_envelope_with_meta",
]
