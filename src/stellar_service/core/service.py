"""
Main service orchestrator.

Coordinates the signer, builder and gateway for each API operation.
"""

from typing import Optional

import structlog

from stellar_sdk import Asset

from stellar_service.config import ServiceConfig, get_config
from stellar_service.core.errors import MISSING_SIGNED_XDR, InvalidRequestError
from stellar_service.core.models import (
    GeneratedKeypair,
    PaymentRequest,
    SubmissionResult,
    TrustlineRequest,
)
from stellar_service.horizon.adapter import HorizonAdapter
from stellar_service.horizon.interface import HorizonInterface
from stellar_service.tx.builder import TransactionBuilder, parse_envelope, resolve_asset
from stellar_service.tx.signer import TransactionSigner, generate_keypair

logger = structlog.get_logger(__name__)


class LedgerService:
    """
    Stateless facade over the Stellar SDK and the Horizon gateway.

    Every call is independent: nothing about a request outlives it.

    Usage:
        ```python
        service = LedgerService()
        await service.start()
        xdr = await service.create_payment(PaymentRequest(...))
        ```
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        horizon: Optional[HorizonInterface] = None,
    ):
        """
        Initialize the service.

        Args:
            config: Service configuration
            horizon: Custom gateway interface (Horizon adapter if not provided)
        """
        self.config = config or get_config()
        self.horizon = horizon or HorizonAdapter(self.config)
        self.builder = TransactionBuilder(self.horizon, self.config)

    async def start(self) -> None:
        """Open the gateway connection."""
        await self.horizon.connect()
        logger.info(
            "service_started",
            network=self.config.network.value,
            horizon_url=self.config.horizon_url,
        )

    async def stop(self) -> None:
        """Close the gateway connection."""
        await self.horizon.disconnect()
        logger.info("service_stopped")

    def create_keypair(self) -> GeneratedKeypair:
        """Generate a random keypair."""
        return generate_keypair()

    async def create_payment(self, request: PaymentRequest) -> str:
        """
        Build and sign a payment.

        Returns:
            Signed envelope as base64 XDR

        Raises:
            InvalidRequestError: On missing fields or a non-native asset without issuer
        """
        if not request.is_complete:
            raise InvalidRequestError()

        asset = resolve_asset(request.asset_code, request.asset_issuer)
        signer = TransactionSigner.from_secret(request.source_secret)

        envelope = await self.builder.build_payment(
            signer,
            destination=request.destination_address,
            asset=asset,
            amount=request.amount,
        )
        return envelope.to_xdr()

    async def create_trustline(self, request: TrustlineRequest) -> str:
        """
        Build and sign a change-trust operation.

        Returns:
            Signed envelope as base64 XDR
        """
        if not request.is_complete:
            raise InvalidRequestError()

        signer = TransactionSigner.from_secret(request.secret_key)
        asset = Asset(request.asset_code, request.asset_issuer)

        envelope = await self.builder.build_trustline(signer, asset, request.limit)
        return envelope.to_xdr()

    async def submit_transaction(self, signed_xdr: Optional[str]) -> SubmissionResult:
        """
        Decode a signed envelope and forward it to the gateway.

        Raises:
            InvalidRequestError: If no envelope was supplied
        """
        if not signed_xdr:
            raise InvalidRequestError(MISSING_SIGNED_XDR)

        envelope = parse_envelope(signed_xdr, self.config.network_passphrase)
        response = await self.horizon.submit_transaction(envelope)

        return SubmissionResult(
            transaction_id=response.transaction_id,
            ledger=response.ledger,
            hash=response.hash,
        )
