"""Public package exports for the Chapa API client."""

from .async_client import AsyncChapaClient
from .client import ChapaClient
from .config import ChapaConfig, ChapaConfigBuilder
from .core.errors import (
    ChapaClientClosedError,
    ChapaDecodeError,
    ChapaError,
    ChapaHeaderError,
    ChapaTransportError,
    ChapaValidationError,
    InvalidHeaderNameError,
    InvalidHeaderValueError,
    InvalidHttpMethodError,
    MissingApiKeyError,
)
from .core.models import ChapaResponse, ChapaResponseWithMeta

__all__ = [
    "ChapaClient",
    "AsyncChapaClient",
    "ChapaConfig",
    "ChapaConfigBuilder",
    "ChapaResponse",
    "ChapaResponseWithMeta",
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
