"""Client configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import timedelta
from types import MappingProxyType

from .core.errors import MissingApiKeyError

PLACEHOLDER_API_KEY = "placeholder_api_key"
DEFAULT_BASE_URL = "https://api.chapa.co"
DEFAULT_VERSION = "v1"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_CONTENT_TYPE = "application/json"

API_KEY_ENV = "CHAPA_API_PUBLIC_KEY"
BASE_URL_ENV = "CHAPA_BASE_URL"
VERSION_ENV = "CHAPA_VERSION"


def _with_content_type(headers: Mapping[str, str]) -> dict[str, str]:
    # one entry per case-folded name, later entries win
    merged: dict[str, str] = {}
    for name, value in headers.items():
        merged = {key: current for key, current in merged.items() if key.lower() != name.lower()}
        merged[name] = value
    if not any(name.lower() == "content-type" for name in merged):
        merged["Content-Type"] = DEFAULT_CONTENT_TYPE
    return merged


def _default_headers() -> Mapping[str, str]:
    return {"Content-Type": DEFAULT_CONTENT_TYPE}


def _to_seconds(value: float | timedelta) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


@dataclass(slots=True, frozen=True)
class ChapaConfig:
    """Runtime configuration for the Chapa client."""

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    version: str = DEFAULT_VERSION
    default_headers: Mapping[str, str] = field(default_factory=_default_headers)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "default_headers",
            MappingProxyType(_with_content_type(self.default_headers)),
        )

    @staticmethod
    def builder(environ: Mapping[str, str] | None = None) -> "ChapaConfigBuilder":
        return ChapaConfigBuilder.from_environ(os.environ if environ is None else environ)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ChapaConfig":
        return cls.builder(environ).build()

    def validate(self) -> None:
        if not self.api_key or self.api_key == PLACEHOLDER_API_KEY:
            raise MissingApiKeyError()
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not self.version:
            raise ValueError("version must not be empty")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")


@dataclass(slots=True, frozen=True)
class ChapaConfigBuilder:
    """Immutable fluent builder for :class:`ChapaConfig`.

    Every setter returns a new builder, so a partially configured builder can
    be shared and specialised without affecting other users::

        config = (
            ChapaConfig.builder()
            .api_key("CHASECK_TEST-...")
            .timeout(10)
            .add_header("X-Client-ID", "checkout-service")
            .build()
        )
    """

    api_key_value: str | None = field(default=None, repr=False)
    base_url_value: str = DEFAULT_BASE_URL
    version_value: str = DEFAULT_VERSION
    headers: tuple[tuple[str, str], ...] = (("Content-Type", DEFAULT_CONTENT_TYPE),)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "ChapaConfigBuilder":
        return cls(
            api_key_value=environ.get(API_KEY_ENV) or PLACEHOLDER_API_KEY,
            base_url_value=environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL,
            version_value=environ.get(VERSION_ENV) or DEFAULT_VERSION,
        )

    def api_key(self, key: str) -> "ChapaConfigBuilder":
        return replace(self, api_key_value=key)

    def base_url(self, url: str) -> "ChapaConfigBuilder":
        return replace(self, base_url_value=url)

    def version(self, version: str) -> "ChapaConfigBuilder":
        return replace(self, version_value=version)

    def timeout(self, value: float | timedelta) -> "ChapaConfigBuilder":
        return replace(self, timeout_seconds=_to_seconds(value))

    def add_header(self, key: str, value: str) -> "ChapaConfigBuilder":
        kept = tuple((name, current) for name, current in self.headers if name.lower() != key.lower())
        return replace(self, headers=kept + ((key, value),))

    def build(self) -> ChapaConfig:
        if self.api_key_value is None or self.api_key_value == PLACEHOLDER_API_KEY:
            raise MissingApiKeyError()
        config = ChapaConfig(
            api_key=self.api_key_value,
            base_url=self.base_url_value,
            version=self.version_value,
            default_headers=dict(self.headers),
            timeout_seconds=self.timeout_seconds,
        )
        config.validate()
        return config


__all__ = [
    "PLACEHOLDER_API_KEY",
    "DEFAULT_BASE_URL",
    "DEFAULT_VERSION",
    "DEFAULT_TIMEOUT_SECONDS",
    "API_KEY_ENV",
    "BASE_URL_ENV",
    "VERSION_ENV",
    "ChapaConfig",
    "ChapaConfigBuilder",
]
