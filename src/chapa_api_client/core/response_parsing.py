"""Shared response parsing helpers for sync/async transports."""

from __future__ import annotations

from typing import Protocol

from .errors import ChapaDecodeError


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> dict[str, object]:
    """Parse response JSON payload regardless of the HTTP status code."""

    try:
        payload = response.json()
    except Exception as exc:
        raise ChapaDecodeError(
            "response body is not valid JSON",
            http_status=http_status,
        ) from exc

    if not isinstance(payload, dict):
        raise ChapaDecodeError(
            "response JSON root must be an object",
            http_status=http_status,
        )
    if any(not isinstance(key, str) for key in payload):
        raise ChapaDecodeError(
            "response JSON object keys must be strings",
            http_status=http_status,
        )
    return payload


__all__ = [
    "parse_json_payload",
]
