"""Direct charge response models."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.models import UNSPECIFIED_STATUS, ChapaResponse, JsonValue, message_to_text


@dataclass(slots=True, frozen=True)
class DirectChargeMeta:
    message: str | None
    status: str | None
    ref_id: str | None
    payment_status: str | None


@dataclass(slots=True, frozen=True)
class DirectChargeData:
    auth_type: str | None
    request_id: str | None
    meta: DirectChargeMeta | None
    mode: str | None


@dataclass(slots=True, frozen=True)
class ChargeValidationResponse:
    """Body of ``POST /validate``.

    A completed validation answers ``{"message", "trx_ref", "processor_id"}``
    without ``status`` or ``data``; a rejected one uses the regular envelope.
    """

    message: JsonValue = None
    status: str = UNSPECIFIED_STATUS
    trx_ref: str | None = None
    processor_id: str | None = None
    data: JsonValue = None
    http_status: int | None = field(default=None, compare=False)

    @property
    def message_text(self) -> str:
        return message_to_text(self.message)

    @property
    def is_completed(self) -> bool:
        return self.trx_ref is not None


DirectChargeResponse = ChapaResponse[DirectChargeData]


__all__ = [
    "DirectChargeMeta",
    "DirectChargeData",
    "ChargeValidationResponse",
    "DirectChargeResponse",
]
