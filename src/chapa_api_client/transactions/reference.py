"""Transaction reference generation."""

from __future__ import annotations

import secrets
import string

DEFAULT_PREFIX = "TX-"
DEFAULT_SIZE = 15

_ALPHABET = string.ascii_letters + string.digits


def generate_tx_ref(
    *,
    prefix: str = DEFAULT_PREFIX,
    size: int = DEFAULT_SIZE,
    remove_prefix: bool = False,
) -> str:
    if size < 1:
        raise ValueError("size must be >= 1")
    generated = "".join(secrets.choice(_ALPHABET) for _ in range(size))
    if remove_prefix:
        return generated
    return f"{prefix}{generated}"


__all__ = [
    "generate_tx_ref",
]
