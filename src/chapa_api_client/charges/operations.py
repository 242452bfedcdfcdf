"""Request builders for direct charge endpoints."""

from __future__ import annotations

from ..core.errors import ChapaValidationError
from ..core.operations import PreparedCall
from .models import ChargeValidationResponse, DirectChargeResponse
from .options import DirectChargeOptions, DirectChargeType, VerifyDirectChargeOptions
from .parser import parse_charge_validation_response, parse_direct_charge_response


def charge_type_params(charge_type: DirectChargeType | str) -> dict[str, str]:
    if isinstance(charge_type, DirectChargeType):
        return {"type": charge_type.value}
    if isinstance(charge_type, str) and charge_type.strip():
        return {"type": charge_type.strip()}
    raise ChapaValidationError("charge_type must be a DirectChargeType or non-empty str")


def direct_charge_call(
    charge_type: DirectChargeType | str,
    options: DirectChargeOptions,
) -> PreparedCall[DirectChargeResponse]:
    return PreparedCall(
        "POST",
        "charges",
        decode=parse_direct_charge_response,
        params=charge_type_params(charge_type),
        body=options.to_payload(),
    )


def validate_charge_call(
    charge_type: DirectChargeType | str,
    options: VerifyDirectChargeOptions,
) -> PreparedCall[ChargeValidationResponse]:
    return PreparedCall(
        "POST",
        "validate",
        decode=parse_charge_validation_response,
        params=charge_type_params(charge_type),
        body=options.to_payload(),
    )


__all__ = [
    "charge_type_params",
    "direct_charge_call",
    "validate_charge_call",
]
