"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

import re
from enum import Enum

import httpx

from ..config import ChapaConfig
from .errors import InvalidHeaderNameError, InvalidHeaderValueError, InvalidHttpMethodError

# RFC 7230 token / field-value; httpx encodes str header values as ASCII
_HEADER_NAME_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_HEADER_VALUE_RE = re.compile(r"[\t\x20-\x7e]*")


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


def resolve_method(method: str) -> HttpMethod:
    try:
        return HttpMethod(method.upper())
    except (AttributeError, ValueError):
        raise InvalidHttpMethodError(f"Invalid HTTP method: {method!r}") from None


def build_url(config: ChapaConfig, endpoint: str) -> str:
    return f"{config.base_url}/{config.version}/{endpoint}"


def validate_header(name: str, value: str) -> None:
    if not isinstance(name, str) or not _HEADER_NAME_RE.fullmatch(name):
        raise InvalidHeaderNameError(f"Invalid header name: {name!r}")
    if not isinstance(value, str) or not _HEADER_VALUE_RE.fullmatch(value):
        raise InvalidHeaderValueError(f"Invalid header value for {name}")


def build_headers(config: ChapaConfig) -> dict[str, str]:
    headers = {"Authorization": f"Bearer {config.api_key}"}
    for name, value in config.default_headers.items():
        # header names are case-insensitive; the configured spelling wins
        headers = {key: current for key, current in headers.items() if key.lower() != name.lower()}
        headers[name] = value
    for name, value in headers.items():
        validate_header(name, value)
    return headers


def build_default_timeout(config: ChapaConfig) -> httpx.Timeout:
    return httpx.Timeout(config.timeout_seconds)


def transport_error_cause(exc: Exception) -> str:
    if isinstance(exc, httpx.TimeoutException):
        return "timeout"
    return "network"


__all__ = [
    "HttpMethod",
    "resolve_method",
    "build_url",
    "validate_header",
    "build_headers",
    "build_default_timeout",
    "transport_error_cause",
]
