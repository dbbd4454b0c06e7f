"""
Horizon REST adapter for gateway integration.

Provides ledger access via the Horizon HTTP API.
"""

from typing import Any, Dict, Optional, Union

import httpx
import structlog

from stellar_sdk import FeeBumpTransactionEnvelope, TransactionEnvelope

from stellar_service.config import ServiceConfig, get_config
from stellar_service.horizon.interface import (
    AccountNotFoundError,
    HorizonConnectionError,
    HorizonInterface,
    SubmitResponse,
    TransactionSubmitError,
)
from stellar_service.log import short_key

logger = structlog.get_logger(__name__)


class HorizonAdapter(HorizonInterface):
    """
    Horizon API adapter.

    Implements the HorizonInterface using Horizon's REST API.
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the Horizon adapter.

        Args:
            config: Service configuration. Uses global config if not provided.
            transport: Custom httpx transport (used by tests)
        """
        self.config = config or get_config()
        self.base_url = self.config.horizon_url
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def headers(self) -> dict:
        """Get default request headers."""
        return {
            "Accept": "application/json",
            "X-Client-Name": "stellar-service",
        }

    async def connect(self) -> None:
        """Establish connection (create HTTP client)."""
        if self._client is not None:
            return

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.config.request_timeout_seconds,
            transport=self._transport,
        )

        # Test connection
        try:
            response = await self._client.get("/")
            if response.status_code != 200:
                raise HorizonConnectionError(f"Horizon health check failed: {response.text}")
            logger.info("horizon_connected", base_url=self.base_url)
        except httpx.RequestError as e:
            raise HorizonConnectionError(f"Failed to connect to Horizon: {e}")

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("horizon_disconnected")

    def _ensure_client(self) -> httpx.AsyncClient:
        """Lazily create the HTTP client without a health check."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self.headers,
                timeout=self.config.request_timeout_seconds,
                transport=self._transport,
            )
        return self._client

    async def get_account(self, account_id: str) -> Dict[str, Any]:
        """Get an account record from Horizon."""
        client = self._ensure_client()
        path = f"/accounts/{account_id}"

        try:
            response = await client.get(path)
        except httpx.RequestError as e:
            logger.error("horizon_request_error", path=path, error=str(e))
            raise HorizonConnectionError(f"Horizon request failed: {e}")

        if response.status_code == 404:
            raise AccountNotFoundError(account_id)

        if response.status_code != 200:
            error_msg = _problem_detail(response)
            logger.error(
                "horizon_request_failed",
                path=path,
                status=response.status_code,
                error=error_msg,
            )
            raise HorizonConnectionError(f"Horizon API error: {error_msg}")

        data = response.json()
        logger.debug(
            "account_loaded",
            account=short_key(account_id),
            sequence=data.get("sequence"),
        )
        return data

    async def submit_transaction(
        self,
        envelope: Union[TransactionEnvelope, FeeBumpTransactionEnvelope],
    ) -> SubmitResponse:
        """Submit a signed transaction."""
        client = self._ensure_client()

        try:
            response = await client.post(
                "/transactions",
                data={"tx": envelope.to_xdr()},
            )
        except httpx.RequestError as e:
            raise TransactionSubmitError(f"Transaction submission request failed: {e}")

        if response.status_code != 200:
            result_codes = _result_codes(response)
            error_msg = _problem_detail(response)
            if result_codes:
                error_msg = f"{error_msg} {result_codes}"
            logger.error(
                "tx_submit_failed",
                status=response.status_code,
                error=error_msg,
            )
            raise TransactionSubmitError(
                f"Transaction submission failed: {error_msg}",
                result_codes=result_codes,
            )

        result = SubmitResponse(response.json())
        logger.info("tx_submitted", tx_hash=result.hash, ledger=result.ledger)
        return result


def _problem_detail(response: httpx.Response) -> str:
    """Extract a readable message from a Horizon problem response."""
    try:
        problem = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

    if not isinstance(problem, dict):
        return response.text
    return problem.get("title") or problem.get("detail") or f"HTTP {response.status_code}"


def _result_codes(response: httpx.Response) -> dict:
    """Extract transaction/operation result codes from a failed submission."""
    try:
        problem = response.json()
    except ValueError:
        return {}

    if not isinstance(problem, dict):
        return {}
    extras = problem.get("extras") or {}
    return extras.get("result_codes") or {}
