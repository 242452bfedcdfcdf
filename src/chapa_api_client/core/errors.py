"""Error types."""

from __future__ import annotations


class ChapaError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class MissingApiKeyError(ChapaError):
    """API key is absent or still the placeholder value."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or (
                "API Key is required but not set. Set it using the "
                "CHAPA_API_PUBLIC_KEY environment variable or via the builder's "
                "api_key() method."
            ),
            cause="config",
        )


class ChapaHeaderError(ChapaError):
    """Configured header is not a legal HTTP header."""


class InvalidHeaderNameError(ChapaHeaderError):
    """Header name is not a valid token."""


class InvalidHeaderValueError(ChapaHeaderError):
    """Header value contains forbidden characters."""


class InvalidHttpMethodError(ChapaError):
    """HTTP method outside of the supported set."""


class ChapaValidationError(ChapaError):
    """Invalid input rejected before any request is sent."""


class ChapaTransportError(ChapaError):
    """Network/transport-level failure."""


class ChapaDecodeError(ChapaError):
    """Response body could not be decoded into the requested shape."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        http_status: int | None = None,
    ) -> None:
        super().__init__(message, http_status=http_status, cause="decode")
        self.field = field


class ChapaClientClosedError(ChapaError):
    """Raised when client is used after close."""


__all__ = [
    "ChapaError",
    "MissingApiKeyError",
    "ChapaHeaderError",
    "InvalidHeaderNameError",
    "InvalidHeaderValueError",
    "InvalidHttpMethodError",
    "ChapaValidationError",
    "ChapaTransportError",
    "ChapaDecodeError",
    "ChapaClientClosedError",
]
