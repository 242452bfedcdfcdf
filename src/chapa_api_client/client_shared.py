"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import ChapaConfig
from .core.errors import ChapaValidationError


def resolve_config(*, config: ChapaConfig | None, api_key: str | None) -> ChapaConfig:
    """Pick the explicit config, else build one from ``api_key`` and the environment."""
    if config is not None and api_key is not None:
        raise ChapaValidationError("pass either config or api_key, not both")
    if config is not None:
        return config
    builder = ChapaConfig.builder()
    if api_key is not None:
        builder = builder.api_key(api_key)
    return builder.build()


def validate_client_config(config: ChapaConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise ChapaValidationError(str(exc)) from exc


__all__ = [
    "resolve_config",
    "validate_client_config",
]
