"""Direct mobile-money charges."""

from .models import ChargeValidationResponse, DirectChargeData, DirectChargeMeta, DirectChargeResponse
from .options import DirectChargeOptions, DirectChargeType, VerifyDirectChargeOptions

__all__ = [
    "DirectChargeType",
    "DirectChargeOptions",
    "VerifyDirectChargeOptions",
    "DirectChargeData",
    "DirectChargeMeta",
    "DirectChargeResponse",
    "ChargeValidationResponse",
]
