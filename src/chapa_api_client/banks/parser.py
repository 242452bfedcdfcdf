"""Parsers from bank/balance/swap payloads into typed response objects."""

from __future__ import annotations

from ..core.fields import as_list, as_object, read_datetime, read_float, read_int, read_str
from ..core.models import decode_envelope
from .models import Balance, BalancesResponse, Bank, BanksResponse, SwapResponse, SwapResult

JsonObject = dict[str, object]


def parse_bank(raw: object, *, path: str = "data") -> Bank:
    item = as_object(raw, path=path)
    return Bank(
        id=read_int(item, "id", path=path),
        slug=read_str(item, "slug", path=path),
        swift=read_str(item, "swift", path=path),
        name=read_str(item, "name", path=path),
        acct_length=read_int(item, "acct_length", path=path),
        country_id=read_int(item, "country_id", path=path),
        is_mobilemoney=read_int(item, "is_mobilemoney", path=path),
        is_rtgs=read_int(item, "is_rtgs", path=path),
        is_active=read_int(item, "is_active", path=path),
        currency=read_str(item, "currency", path=path),
        created_at=read_datetime(item, "created_at", path=path),
        updated_at=read_datetime(item, "updated_at", path=path),
    )


def parse_banks(raw: object) -> tuple[Bank, ...]:
    items = as_list(raw, path="data")
    return tuple(parse_bank(item, path=f"data[{index}]") for index, item in enumerate(items))


def parse_balance(raw: object, *, path: str = "data") -> Balance:
    item = as_object(raw, path=path)
    return Balance(
        currency=read_str(item, "currency", path=path),
        available_balance=read_float(item, "available_balance", path=path),
        ledger_balance=read_float(item, "ledger_balance", path=path),
    )


def parse_balances(raw: object) -> tuple[Balance, ...]:
    # A single-currency lookup may answer with one object instead of a list.
    if isinstance(raw, dict):
        return (parse_balance(raw),)
    items = as_list(raw, path="data")
    return tuple(parse_balance(item, path=f"data[{index}]") for index, item in enumerate(items))


def parse_swap_result(raw: object) -> SwapResult:
    item = as_object(raw, path="data")
    return SwapResult(
        status=read_str(item, "status", path="data"),
        ref_id=read_str(item, "ref_id", path="data"),
        from_currency=read_str(item, "from_currency", path="data"),
        to_currency=read_str(item, "to_currency", path="data"),
        amount=read_float(item, "amount", path="data"),
        exchanged_amount=read_float(item, "exchanged_amount", path="data"),
        charge=read_float(item, "charge", path="data"),
        rate=read_float(item, "rate", path="data"),
        created_at=read_datetime(item, "created_at", path="data"),
        updated_at=read_datetime(item, "updated_at", path="data"),
    )


def parse_banks_response(payload: JsonObject, http_status: int | None = None) -> BanksResponse:
    return decode_envelope(payload, parse_banks, http_status=http_status)


def parse_balances_response(
    payload: JsonObject,
    http_status: int | None = None,
) -> BalancesResponse:
    return decode_envelope(payload, parse_balances, http_status=http_status)


def parse_swap_response(payload: JsonObject, http_status: int | None = None) -> SwapResponse:
    return decode_envelope(payload, parse_swap_result, http_status=http_status)


__all__ = [
    "parse_bank",
    "parse_banks",
    "parse_balance",
    "parse_balances",
    "parse_swap_result",
    "parse_banks_response",
    "parse_balances_response",
    "parse_swap_response",
]
