"""Sync direct charge operations."""

from __future__ import annotations

from ..core.transport import SyncTransport
from .models import ChargeValidationResponse, DirectChargeResponse
from .operations import direct_charge_call, validate_charge_call
from .options import DirectChargeOptions, DirectChargeType, VerifyDirectChargeOptions


class ChargesService:
    def __init__(self, transport: SyncTransport) -> None:
        self._transport = transport

    def charge(
        self,
        charge_type: DirectChargeType | str,
        options: DirectChargeOptions,
    ) -> DirectChargeResponse:
        return self._transport.execute(direct_charge_call(charge_type, options))

    def validate(
        self,
        charge_type: DirectChargeType | str,
        options: VerifyDirectChargeOptions,
    ) -> ChargeValidationResponse:
        return self._transport.execute(validate_charge_call(charge_type, options))


__all__ = [
    "ChargesService",
]
