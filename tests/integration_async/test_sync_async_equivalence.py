from __future__ import annotations

import pytest

from chapa_api_client.async_client import AsyncChapaClient
from chapa_api_client.client import ChapaClient
from chapa_api_client.core.async_transport import AsyncTransport
from chapa_api_client.core.transport import SyncTransport
from tests.shared.transport import AsyncSequencedClient, Response, SyncSequencedClient, build_config

SCENARIOS = {
    "banks": ("banks_success.json", lambda c: c.banks.list_banks()),
    "balances": ("balances_success.json", lambda c: c.banks.list_balances()),
    "transactions": ("transactions_page1.json", lambda c: c.transactions.list_all()),
    "verify-transfer": ("verify_transfer_success.json", lambda c: c.transfers.verify("chewatatest-6669")),
    "transfers": ("transfers_batch.json", lambda c: c.transfers.list_all(page=1)),
    "failure": ("invalid_api_key.json", lambda c: c.transactions.verify("missing")),
}


@pytest.mark.asyncio
@pytest.mark.parametrize("scenario", list(SCENARIOS))
async def test_sync_async_decode_equivalence(fixture_loader, scenario: str):
    fixture_name, invoke = SCENARIOS[scenario]
    config = build_config()

    sync_fake = SyncSequencedClient([Response(200, fixture_loader(fixture_name))])
    async_fake = AsyncSequencedClient([Response(200, fixture_loader(fixture_name))])

    with ChapaClient(config=config, transport=SyncTransport(config, client=sync_fake)) as sync_client:
        sync_result = invoke(sync_client)
    async with AsyncChapaClient(
        config=config,
        transport=AsyncTransport(config, client=async_fake),
    ) as async_client:
        async_result = await invoke(async_client)

    assert sync_result == async_result
    assert sync_fake.calls == async_fake.calls
