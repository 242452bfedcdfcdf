from __future__ import annotations

import pytest

from chapa_api_client.charges import (
    DirectChargeOptions,
    DirectChargeType,
    VerifyDirectChargeOptions,
)
from chapa_api_client.charges.operations import charge_type_params, direct_charge_call, validate_charge_call
from chapa_api_client.charges.parser import parse_charge_validation_response, parse_direct_charge_response
from chapa_api_client.core.errors import ChapaValidationError


def _charge_options() -> DirectChargeOptions:
    return DirectChargeOptions(mobile="09xxxxxxxx", currency="ETB", amount="10", tx_ref="12311se2319ud4")


@pytest.mark.parametrize(
    ("charge_type", "tag"),
    [
        (DirectChargeType.TELEBIRR, "telebirr"),
        (DirectChargeType.MPESA, "mpesa"),
        (DirectChargeType.AMOLE, "amole"),
        (DirectChargeType.CBEBIRR, "cbebirr"),
        (DirectChargeType.EBIRR, "ebirr"),
        (DirectChargeType.AWASHBIRR, "awashbirr"),
    ],
)
def test_known_charge_types_map_to_wire_tags(charge_type, tag):
    assert charge_type.value == tag
    assert str(charge_type) == tag
    assert charge_type.is_known is True


def test_charge_type_value_is_stripped():
    charge_type = DirectChargeType("  mpesa ")
    assert charge_type == DirectChargeType.MPESA
    assert charge_type.is_known is True
    assert charge_type_params(charge_type) == {"type": "mpesa"}


def test_other_charge_type_is_forward_compatible():
    charge_type = DirectChargeType.other("kacha")
    assert charge_type.value == "kacha"
    assert charge_type.is_known is False
    assert charge_type_params(charge_type) == {"type": "kacha"}


def test_charge_types_compare_by_value():
    assert DirectChargeType.other("telebirr") == DirectChargeType.TELEBIRR
    assert DirectChargeType.other("telebirr").is_known is True


def test_charge_type_rejects_empty_tag():
    with pytest.raises(ChapaValidationError):
        DirectChargeType.other("")


def test_charge_type_params_accepts_plain_strings():
    assert charge_type_params(" amole ") == {"type": "amole"}
    with pytest.raises(ChapaValidationError):
        charge_type_params("")


def test_direct_charge_options_payload():
    assert _charge_options().to_payload() == {
        "mobile": "09xxxxxxxx",
        "currency": "ETB",
        "amount": "10",
        "tx_ref": "12311se2319ud4",
    }


def test_direct_charge_call():
    call = direct_charge_call(DirectChargeType.TELEBIRR, _charge_options())
    assert call.method == "POST"
    assert call.endpoint == "charges"
    assert call.params == {"type": "telebirr"}
    assert call.body == _charge_options().to_payload()


def test_validate_charge_call():
    call = validate_charge_call(
        DirectChargeType.AMOLE,
        VerifyDirectChargeOptions(reference="CHcuKjgnN0Dk0", client="opaque-client-token"),
    )
    assert call.method == "POST"
    assert call.endpoint == "validate"
    assert call.params == {"type": "amole"}
    assert call.body == {"reference": "CHcuKjgnN0Dk0", "client": "opaque-client-token"}


def test_parse_direct_charge_response(fixture_loader):
    response = parse_direct_charge_response(fixture_loader("direct_charge_success.json"))
    assert response.is_success is True
    data = response.data
    assert data.auth_type == "ussd"
    assert data.request_id.startswith("66dPW486w0z6")
    assert data.mode == "live"
    assert data.meta is not None
    assert data.meta.ref_id == "CH3mhMQVhsHm2"
    assert data.meta.payment_status == "PENDING"


def test_parse_direct_charge_failure():
    response = parse_direct_charge_response(
        {"message": "Authorization required", "status": "failed", "data": None},
        http_status=400,
    )
    assert response.status == "failed"
    assert response.data is None


def test_parse_charge_validation_success(fixture_loader):
    response = parse_charge_validation_response(fixture_loader("charge_validation_success.json"))
    assert response.message_text == "Payment is completed"
    assert response.trx_ref == "CHS7WFpXdCMR0"
    assert response.processor_id is None
    assert response.status == "Unspecified"
    assert response.data is None
    assert response.is_completed is True


def test_parse_charge_validation_failure(fixture_loader):
    response = parse_charge_validation_response(
        fixture_loader("charge_validation_failure.json"),
        http_status=400,
    )
    assert response.status == "failed"
    assert response.data is None
    assert response.trx_ref is None
    assert response.is_completed is False
    assert response.http_status == 400
