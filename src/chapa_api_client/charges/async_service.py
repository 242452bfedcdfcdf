"""Async direct charge operations."""

from __future__ import annotations

from ..core.async_transport import AsyncTransport
from .models import ChargeValidationResponse, DirectChargeResponse
from .operations import direct_charge_call, validate_charge_call
from .options import DirectChargeOptions, DirectChargeType, VerifyDirectChargeOptions


class AsyncChargesService:
    def __init__(self, transport: AsyncTransport) -> None:
        self._transport = transport

    async def charge(
        self,
        charge_type: DirectChargeType | str,
        options: DirectChargeOptions,
    ) -> DirectChargeResponse:
        return await self._transport.execute(direct_charge_call(charge_type, options))

    async def validate(
        self,
        charge_type: DirectChargeType | str,
        options: VerifyDirectChargeOptions,
    ) -> ChargeValidationResponse:
        return await self._transport.execute(validate_charge_call(charge_type, options))


__all__ = [
    "AsyncChargesService",
]
