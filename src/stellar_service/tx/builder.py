"""
Transaction Builder - constructs payment and trustline transactions.

Loads the source account from the gateway, builds a single-operation
transaction with the configured fee and timeout, and signs it locally.
"""

from decimal import Decimal
from typing import Optional, Union

import structlog

from stellar_sdk import (
    Account,
    Asset,
    FeeBumpTransactionEnvelope,
    TransactionBuilder as StellarTxBuilder,
    TransactionEnvelope,
)

from stellar_service.config import ServiceConfig, get_config
from stellar_service.core.errors import MISSING_ISSUER, InvalidRequestError
from stellar_service.core.models import NATIVE_ASSET_CODE
from stellar_service.horizon.interface import HorizonInterface
from stellar_service.log import short_key
from stellar_service.tx.signer import TransactionSigner

logger = structlog.get_logger(__name__)


class TransactionBuildError(Exception):
    """Raised when transaction construction fails."""
    pass


def resolve_asset(asset_code: Optional[str], asset_issuer: Optional[str]) -> Asset:
    """
    Resolve the asset a payment is made in.

    "XLM" always means the native asset and any issuer is ignored. Every
    other code needs an issuer.

    Raises:
        InvalidRequestError: If a non-native asset has no issuer
    """
    if asset_code == NATIVE_ASSET_CODE:
        return Asset.native()
    if asset_issuer:
        return Asset(asset_code, asset_issuer)
    raise InvalidRequestError(MISSING_ISSUER)


def parse_envelope(
    signed_xdr: str,
    network_passphrase: str,
) -> Union[TransactionEnvelope, FeeBumpTransactionEnvelope]:
    """Decode a base64 envelope against the given network passphrase."""
    return StellarTxBuilder.from_xdr(signed_xdr, network_passphrase)


class TransactionBuilder:
    """
    Builds and signs single-operation transactions.

    Coordinates between the gateway (account state), the Stellar SDK
    transaction builder, and the signer to produce signed envelopes.
    """

    def __init__(
        self,
        horizon: HorizonInterface,
        config: Optional[ServiceConfig] = None,
    ):
        """
        Initialize the transaction builder.

        Args:
            horizon: Gateway interface for account queries
            config: Service configuration
        """
        self.horizon = horizon
        self.config = config or get_config()

    async def build_payment(
        self,
        signer: TransactionSigner,
        destination: str,
        asset: Asset,
        amount: Union[str, Decimal],
    ) -> TransactionEnvelope:
        """
        Build a signed payment transaction.

        Args:
            signer: Signer holding the source account's key
            destination: Receiving account id
            asset: Asset to send
            amount: Amount to send

        Returns:
            Signed transaction envelope

        Raises:
            TransactionBuildError: If the SDK rejects the operation
        """
        account = await self.horizon.load_account(signer.public_key)

        logger.info(
            "building_payment_transaction",
            source=short_key(signer.public_key),
            destination=short_key(destination),
            asset=_asset_label(asset),
        )

        try:
            envelope = (
                self._new_builder(account)
                .append_payment_op(
                    destination=destination,
                    asset=asset,
                    amount=amount,
                )
                .set_timeout(self.config.tx_timeout_seconds)
                .build()
            )
            signer.sign(envelope)
        except Exception as e:
            logger.error("transaction_build_failed", kind="payment", error=str(e))
            raise TransactionBuildError(str(e) or e.__class__.__name__) from e

        logger.info(
            "payment_transaction_built",
            tx_hash=envelope.hash_hex()[:16] + "...",
        )

        return envelope

    async def build_trustline(
        self,
        signer: TransactionSigner,
        asset: Asset,
        limit: Optional[Union[str, Decimal]] = None,
    ) -> TransactionEnvelope:
        """
        Build a signed change-trust transaction.

        Args:
            signer: Signer holding the trusting account's key
            asset: Issued asset to trust
            limit: Trust limit; the configured default when omitted

        Returns:
            Signed transaction envelope
        """
        if limit is None:
            limit = self.config.default_trust_limit
        account = await self.horizon.load_account(signer.public_key)

        logger.info(
            "building_trustline_transaction",
            source=short_key(signer.public_key),
            asset=_asset_label(asset),
            limit=str(limit),
        )

        try:
            envelope = (
                self._new_builder(account)
                .append_change_trust_op(asset=asset, limit=limit)
                .set_timeout(self.config.tx_timeout_seconds)
                .build()
            )
            signer.sign(envelope)
        except Exception as e:
            logger.error("transaction_build_failed", kind="change_trust", error=str(e))
            raise TransactionBuildError(str(e) or e.__class__.__name__) from e

        logger.info(
            "trustline_transaction_built",
            tx_hash=envelope.hash_hex()[:16] + "...",
        )

        return envelope

    def _new_builder(self, account: Account) -> StellarTxBuilder:
        return StellarTxBuilder(
            source_account=account,
            network_passphrase=self.config.network_passphrase,
            base_fee=self.config.base_fee,
        )


def _asset_label(asset: Asset) -> str:
    if asset.is_native():
        return NATIVE_ASSET_CODE
    return f"{asset.code}:{short_key(asset.issuer)}"
