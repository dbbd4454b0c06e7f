"""
Test suite for the Horizon REST adapter.

Uses an httpx mock transport; nothing leaves the process.
"""

from urllib.parse import parse_qs

import httpx
import pytest
from stellar_sdk import Account, Keypair, TransactionBuilder as StellarTxBuilder

from stellar_service.horizon.adapter import HorizonAdapter
from stellar_service.horizon.interface import (
    AccountNotFoundError,
    HorizonConnectionError,
    TransactionSubmitError,
)


def _signed_envelope(keypair: Keypair, passphrase: str):
    envelope = (
        StellarTxBuilder(
            source_account=Account(keypair.public_key, 41),
            network_passphrase=passphrase,
            base_fee=100,
        )
        .append_bump_sequence_op(bump_to=100)
        .set_timeout(30)
        .build()
    )
    envelope.sign(keypair)
    return envelope


class RecordingHandler:
    """Mock Horizon that records requests and answers from a route table."""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"title": "Resource Missing", "status": 404})
        answer = self.routes[key]
        if isinstance(answer, Exception):
            raise answer
        status_code, body = answer
        return httpx.Response(status_code, json=body)


def _adapter(test_config, handler) -> HorizonAdapter:
    return HorizonAdapter(test_config, transport=httpx.MockTransport(handler))


# ============================================================================
# Test Connection
# ============================================================================

class TestConnection:
    """Tests for connecting to Horizon."""

    @pytest.mark.asyncio
    async def test_connect_checks_root(self, test_config):
        handler = RecordingHandler({("GET", "/"): (200, {"horizon_version": "2.30.0"})})
        adapter = _adapter(test_config, handler)

        await adapter.connect()
        await adapter.disconnect()

        assert handler.requests[0].url.path == "/"
        assert adapter._client is None

    @pytest.mark.asyncio
    async def test_connect_unhealthy(self, test_config):
        handler = RecordingHandler({("GET", "/"): (503, {"title": "Service Unavailable"})})
        adapter = _adapter(test_config, handler)

        with pytest.raises(HorizonConnectionError, match="health check failed"):
            await adapter.connect()
        await adapter.disconnect()

    @pytest.mark.asyncio
    async def test_connect_unreachable(self, test_config):
        handler = RecordingHandler({("GET", "/"): httpx.ConnectError("connection refused")})
        adapter = _adapter(test_config, handler)

        with pytest.raises(HorizonConnectionError, match="Failed to connect"):
            await adapter.connect()
        await adapter.disconnect()


# ============================================================================
# Test Account Queries
# ============================================================================

class TestAccounts:
    """Tests for account lookups."""

    @pytest.mark.asyncio
    async def test_load_account(self, test_config, source_keypair):
        account_id = source_keypair.public_key
        handler = RecordingHandler({
            ("GET", f"/accounts/{account_id}"): (200, {"id": account_id, "sequence": "987654321"}),
        })
        adapter = _adapter(test_config, handler)

        account = await adapter.load_account(account_id)
        await adapter.disconnect()

        assert isinstance(account, Account)
        assert account.sequence == 987654321

    @pytest.mark.asyncio
    async def test_account_not_found(self, test_config, source_keypair):
        adapter = _adapter(test_config, RecordingHandler({}))

        with pytest.raises(AccountNotFoundError) as exc_info:
            await adapter.get_account(source_keypair.public_key)
        await adapter.disconnect()

        assert exc_info.value.account_id == source_keypair.public_key
        assert source_keypair.public_key in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_account_server_error(self, test_config, source_keypair):
        handler = RecordingHandler({
            ("GET", f"/accounts/{source_keypair.public_key}"): (500, {"title": "Internal Server Error"}),
        })
        adapter = _adapter(test_config, handler)

        with pytest.raises(HorizonConnectionError, match="Internal Server Error"):
            await adapter.get_account(source_keypair.public_key)
        await adapter.disconnect()

    @pytest.mark.asyncio
    async def test_account_transport_error(self, test_config, source_keypair):
        handler = RecordingHandler({
            ("GET", f"/accounts/{source_keypair.public_key}"): httpx.ConnectError("connection refused"),
        })
        adapter = _adapter(test_config, handler)

        with pytest.raises(HorizonConnectionError, match="connection refused"):
            await adapter.get_account(source_keypair.public_key)
        await adapter.disconnect()


# ============================================================================
# Test Transaction Submission
# ============================================================================

class TestSubmission:
    """Tests for transaction submission."""

    @pytest.mark.asyncio
    async def test_submit_posts_form_encoded_xdr(self, test_config, source_keypair):
        envelope = _signed_envelope(source_keypair, test_config.network_passphrase)
        tx_hash = envelope.hash_hex()
        handler = RecordingHandler({
            ("POST", "/transactions"): (200, {"id": tx_hash, "hash": tx_hash, "ledger": 4242}),
        })
        adapter = _adapter(test_config, handler)

        result = await adapter.submit_transaction(envelope)
        await adapter.disconnect()

        assert result.transaction_id == tx_hash
        assert result.hash == tx_hash
        assert result.ledger == 4242

        form = parse_qs(handler.requests[0].content.decode())
        assert form["tx"] == [envelope.to_xdr()]

    @pytest.mark.asyncio
    async def test_submit_rejected(self, test_config, source_keypair):
        envelope = _signed_envelope(source_keypair, test_config.network_passphrase)
        handler = RecordingHandler({
            ("POST", "/transactions"): (400, {
                "title": "Transaction Failed",
                "status": 400,
                "extras": {"result_codes": {"transaction": "tx_bad_seq"}},
            }),
        })
        adapter = _adapter(test_config, handler)

        with pytest.raises(TransactionSubmitError) as exc_info:
            await adapter.submit_transaction(envelope)
        await adapter.disconnect()

        assert exc_info.value.result_codes == {"transaction": "tx_bad_seq"}
        assert "Transaction Failed" in str(exc_info.value)
        assert "tx_bad_seq" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_submit_transport_error(self, test_config, source_keypair):
        envelope = _signed_envelope(source_keypair, test_config.network_passphrase)
        handler = RecordingHandler({
            ("POST", "/transactions"): httpx.ReadTimeout("timed out"),
        })
        adapter = _adapter(test_config, handler)

        with pytest.raises(TransactionSubmitError, match="request failed"):
            await adapter.submit_transaction(envelope)
        await adapter.disconnect()
