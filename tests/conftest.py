"""
Pytest configuration and shared fixtures for the test suite.
"""

from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from stellar_sdk import Keypair

from stellar_service.api.app import create_app
from stellar_service.config import NetworkType, ServiceConfig
from stellar_service.core.service import LedgerService
from stellar_service.horizon.interface import (
    AccountNotFoundError,
    HorizonConnectionError,
    HorizonInterface,
    SubmitResponse,
    TransactionSubmitError,
)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def test_config() -> ServiceConfig:
    """Create a test configuration."""
    return ServiceConfig(
        network=NetworkType.TESTNET,
        horizon_url="https://horizon.test.invalid",
        port=3002,
        log_level="DEBUG",
    )


# ============================================================================
# Test Data Generators
# ============================================================================

STARTING_SEQUENCE = 123456789000


@pytest.fixture
def source_keypair() -> Keypair:
    """Keypair of a funded source account."""
    return Keypair.random()


@pytest.fixture
def destination_keypair() -> Keypair:
    return Keypair.random()


@pytest.fixture
def issuer_keypair() -> Keypair:
    return Keypair.random()


# ============================================================================
# Mock Horizon Interface
# ============================================================================

class MockHorizon(HorizonInterface):
    """Mock gateway for testing."""

    def __init__(self):
        self.accounts: Dict[str, Dict[str, Any]] = {}
        self.submitted: List[str] = []
        self.unreachable = False
        self.reject_with: Optional[dict] = None
        self.ledger = 50_000_000
        self._connected = False

    async def connect(self) -> None:
        if self.unreachable:
            raise HorizonConnectionError("Failed to connect to Horizon: connection refused")
        self._connected = True

    async def disconnect(self) -> None:
        self._connected = False

    async def get_account(self, account_id: str) -> Dict[str, Any]:
        if self.unreachable:
            raise HorizonConnectionError("Horizon request failed: connection refused")
        if account_id not in self.accounts:
            raise AccountNotFoundError(account_id)
        return self.accounts[account_id]

    async def submit_transaction(self, envelope) -> SubmitResponse:
        if self.unreachable:
            raise TransactionSubmitError("Transaction submission request failed: connection refused")
        if self.reject_with is not None:
            raise TransactionSubmitError(
                f"Transaction submission failed: Transaction Failed {self.reject_with}",
                result_codes=self.reject_with,
            )
        self.submitted.append(envelope.to_xdr())
        self.ledger += 1
        tx_hash = envelope.hash_hex()
        return SubmitResponse({"id": tx_hash, "hash": tx_hash, "ledger": self.ledger})

    def add_account(self, account_id: str, sequence: int = STARTING_SEQUENCE) -> None:
        """Add a funded account to the mock."""
        self.accounts[account_id] = {
            "id": account_id,
            "account_id": account_id,
            "sequence": str(sequence),
            "balances": [{"asset_type": "native", "balance": "1000.0000000"}],
        }


@pytest.fixture
def mock_horizon() -> MockHorizon:
    """Create a mock gateway."""
    return MockHorizon()


@pytest.fixture
def funded_horizon(mock_horizon, source_keypair) -> MockHorizon:
    """Create a mock gateway that knows the source account."""
    mock_horizon.add_account(source_keypair.public_key)
    return mock_horizon


# ============================================================================
# Service and API Fixtures
# ============================================================================

@pytest.fixture
def service(test_config, funded_horizon) -> LedgerService:
    return LedgerService(config=test_config, horizon=funded_horizon)


@pytest.fixture
def client(service) -> TestClient:
    """FastAPI TestClient wired to the mock gateway."""
    app = create_app(service=service)
    with TestClient(app) as test_client:
        yield test_client
