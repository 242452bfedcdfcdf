"""Parsers from direct charge payloads into typed response objects."""

from __future__ import annotations

from ..core.fields import JsonObject, as_object, read_object, read_str
from ..core.models import decode_envelope, decode_status
from .models import ChargeValidationResponse, DirectChargeData, DirectChargeMeta, DirectChargeResponse


def parse_direct_charge_meta(raw: object) -> DirectChargeMeta:
    item = as_object(raw, path="data.meta")
    return DirectChargeMeta(
        message=read_str(item, "message", path="data.meta"),
        status=read_str(item, "status", path="data.meta"),
        ref_id=read_str(item, "ref_id", path="data.meta"),
        payment_status=read_str(item, "payment_status", path="data.meta"),
    )


def parse_direct_charge_data(raw: object) -> DirectChargeData:
    item = as_object(raw, path="data")
    meta = read_object(item, "meta", path="data")
    return DirectChargeData(
        auth_type=read_str(item, "auth_type", path="data"),
        request_id=read_str(item, "requestID", path="data"),
        meta=parse_direct_charge_meta(meta) if meta is not None else None,
        mode=read_str(item, "mode", path="data"),
    )


def parse_direct_charge_response(
    payload: JsonObject,
    http_status: int | None = None,
) -> DirectChargeResponse:
    return decode_envelope(payload, parse_direct_charge_data, http_status=http_status)


def parse_charge_validation_response(
    payload: JsonObject,
    http_status: int | None = None,
) -> ChargeValidationResponse:
    return ChargeValidationResponse(
        message=payload.get("message"),
        status=decode_status(payload),
        trx_ref=read_str(payload, "trx_ref"),
        processor_id=read_str(payload, "processor_id"),
        data=payload.get("data"),
        http_status=http_status,
    )


__all__ = [
    "parse_direct_charge_meta",
    "parse_direct_charge_data",
    "parse_direct_charge_response",
    "parse_charge_validation_response",
]
