from __future__ import annotations

import pytest

from chapa_api_client.core.errors import (
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


@pytest.mark.parametrize(
    "error_type",
    [
        MissingApiKeyError,
        ChapaHeaderError,
        InvalidHeaderNameError,
        InvalidHeaderValueError,
        InvalidHttpMethodError,
        ChapaValidationError,
        ChapaTransportError,
        ChapaDecodeError,
        ChapaClientClosedError,
    ],
)
def test_every_error_derives_from_chapa_error(error_type: type[Exception]):
    assert issubclass(error_type, ChapaError)


def test_header_errors_share_a_base():
    assert issubclass(InvalidHeaderNameError, ChapaHeaderError)
    assert issubclass(InvalidHeaderValueError, ChapaHeaderError)


def test_missing_api_key_has_default_message():
    err = MissingApiKeyError()
    assert "CHAPA_API_PUBLIC_KEY" in str(err)
    assert err.cause == "config"
    assert err.http_status is None


def test_decode_error_keeps_field_and_status():
    err = ChapaDecodeError("bad", field="data.amount", http_status=200)
    assert err.field == "data.amount"
    assert err.http_status == 200
    assert err.cause == "decode"


def test_transport_error_keeps_cause():
    err = ChapaTransportError("network/transport error", cause="timeout")
    assert err.cause == "timeout"
