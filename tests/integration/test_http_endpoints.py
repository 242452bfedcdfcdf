from __future__ import annotations

import json

import httpx
import pytest

from chapa_api_client.banks import SwapOptions
from chapa_api_client.charges import DirectChargeOptions, DirectChargeType
from chapa_api_client.client import ChapaClient
from chapa_api_client.config import ChapaConfig
from chapa_api_client.core.errors import ChapaTransportError, InvalidHeaderValueError
from chapa_api_client.core.transport import SyncTransport
from chapa_api_client.transactions import InitializeOptions

API_KEY = "CHASECK-xxxxxxxxxxxxxxxx"
BASE_URL = "https://mock.chapa.test"


class Router:
    """Maps (method, path, query) to canned responses and records requests."""

    def __init__(self, routes: dict[tuple[str, str], list[tuple[int, object]]]):
        self.routes = {key: list(value) for key, value in routes.items()}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query.decode()}"
        status, body = self.routes[(request.method, path)].pop(0)
        return httpx.Response(status, json=body)


def _client(router: Router) -> ChapaClient:
    config = ChapaConfig.builder({}).api_key(API_KEY).base_url(BASE_URL).build()
    http = httpx.Client(transport=httpx.MockTransport(router), timeout=config.timeout_seconds)
    return ChapaClient(config=config, transport=SyncTransport(config, client=http))


def test_get_banks_success_then_failure(fixture_loader):
    router = Router(
        {
            ("GET", "/v1/banks"): [
                (200, fixture_loader("banks_success.json")),
                (200, fixture_loader("invalid_api_key.json")),
            ]
        }
    )
    with _client(router) as client:
        success = client.banks.list_banks()
        failure = client.banks.list_banks()

    assert success.data is not None
    assert success.data[0].id == 130
    assert failure.status == "failed"
    assert failure.data is None
    assert all(r.headers["authorization"] == f"Bearer {API_KEY}" for r in router.requests)
    assert all(r.headers["content-type"] == "application/json" for r in router.requests)


def test_balances_by_currency_400_failure_decodes(fixture_loader):
    router = Router(
        {
            ("GET", "/v1/balances/ETB"): [
                (200, fixture_loader("balances_success.json")),
                (400, fixture_loader("invalid_api_key.json")),
            ]
        }
    )
    with _client(router) as client:
        success = client.banks.get_balances("ETB")
        failure = client.banks.get_balances("ETB")

    assert success.status == "success"
    assert success.data is not None
    assert failure.status == "failed"
    assert failure.data is None
    assert failure.http_status == 400


def test_swap_sends_wire_body_and_decodes_floats(fixture_loader):
    router = Router({("POST", "/v1/swap"): [(200, fixture_loader("swap_success.json"))]})
    with _client(router) as client:
        response = client.banks.swap(SwapOptions(amount=100.0, from_currency="USD", to_currency="ETB"))

    assert json.loads(router.requests[0].content) == {"amount": 100.0, "from": "USD", "to": "ETB"}
    assert response.data.exchanged_amount == 127.0
    assert isinstance(response.data.rate, float)


def test_initialize_then_verify_transaction(fixture_loader):
    router = Router(
        {
            ("POST", "/v1/transaction/initialize"): [(200, fixture_loader("initialize_success.json"))],
            ("GET", "/v1/transaction/verify/chewatatest-6669"): [
                (200, fixture_loader("verify_transaction_success.json"))
            ],
        }
    )
    options = InitializeOptions(amount="100", currency="ETB", tx_ref="chewatatest-6669").with_customer(
        email="customer@gmail.com",
        first_name="John",
        last_name="Doe",
    )
    with _client(router) as client:
        initialized = client.transactions.initialize(options)
        verified = client.transactions.verify("chewatatest-6669")

    assert initialized.status == "success"
    assert initialized.data is not None
    sent = json.loads(router.requests[0].content)
    assert sent["tx_ref"] == "chewatatest-6669"
    assert sent["amount"] == "100"
    assert verified.data.amount == 100.0
    assert verified.data.status == "success"


def test_verify_bulk_transfer_uses_batch_query(fixture_loader):
    router = Router(
        {
            ("GET", "/v1/transfers?batch_id=1"): [
                (200, fixture_loader("transfers_batch.json")),
                (400, fixture_loader("endpoint_not_found.json")),
            ]
        }
    )
    with _client(router) as client:
        success = client.transfers.verify_bulk(1)
        failure = client.transfers.verify_bulk(1)

    assert success.meta is not None
    assert success.meta.total == 2
    assert success.data is not None
    assert len(success.data) == 2
    assert failure.status == "failed"
    assert failure.data is None
    assert failure.meta is None


def test_direct_charge_encodes_channel_as_query(fixture_loader):
    router = Router(
        {("POST", "/v1/charges?type=telebirr"): [(200, fixture_loader("direct_charge_success.json"))]}
    )
    with _client(router) as client:
        response = client.charges.charge(
            DirectChargeType.TELEBIRR,
            DirectChargeOptions(mobile="09xxxxxxxx", currency="ETB", amount="10", tx_ref="12311se2319ud4"),
        )
    assert response.is_success
    assert response.data.meta.payment_status == "PENDING"


def test_connection_failure_is_transport_error():
    def _down(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    config = ChapaConfig.builder({}).api_key(API_KEY).base_url(BASE_URL).build()
    http = httpx.Client(transport=httpx.MockTransport(_down))
    with ChapaClient(config=config, transport=SyncTransport(config, client=http)) as client:
        with pytest.raises(ChapaTransportError) as exc_info:
            client.banks.list_banks()
    assert exc_info.value.cause == "network"


def test_non_ascii_header_value_fails_before_send():
    router = Router({})
    config = ChapaConfig.builder({}).api_key(API_KEY).base_url(BASE_URL).add_header("X-Shop", "café").build()
    http = httpx.Client(transport=httpx.MockTransport(router))
    with ChapaClient(config=config, transport=SyncTransport(config, client=http)) as client:
        with pytest.raises(InvalidHeaderValueError):
            client.banks.list_banks()
    assert router.requests == []


def test_content_type_override_is_sent_once(fixture_loader):
    router = Router({("GET", "/v1/banks"): [(200, fixture_loader("banks_success.json"))]})
    config = (
        ChapaConfig.builder({})
        .api_key(API_KEY)
        .base_url(BASE_URL)
        .add_header("content-type", "application/json; charset=utf-8")
        .build()
    )
    http = httpx.Client(transport=httpx.MockTransport(router))
    with ChapaClient(config=config, transport=SyncTransport(config, client=http)) as client:
        client.banks.list_banks()
    assert router.requests[0].headers.get_list("content-type") == ["application/json; charset=utf-8"]
