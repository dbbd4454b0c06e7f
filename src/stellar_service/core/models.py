"""
Request and result models.

All entities handled by the service are transient: they live for the
duration of a single HTTP request and are never persisted.
"""

from dataclasses import dataclass
from typing import Optional

NATIVE_ASSET_CODE = "XLM"


@dataclass(frozen=True)
class GeneratedKeypair:
    """A freshly generated keypair."""
    public_key: str
    secret_key: str


@dataclass
class PaymentRequest:
    """
    A request to build and sign a single payment.

    Attributes:
        source_secret: Secret seed of the paying account
        destination_address: Account id receiving the payment
        amount: Decimal amount as a string (e.g. "10.5")
        asset_code: Asset code; "XLM" means the native asset
        asset_issuer: Issuer account id, required for non-native assets
    """
    source_secret: Optional[str]
    destination_address: Optional[str]
    amount: Optional[str]
    asset_code: Optional[str] = NATIVE_ASSET_CODE
    asset_issuer: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.source_secret and self.destination_address and self.amount)

    @property
    def is_native(self) -> bool:
        return self.asset_code == NATIVE_ASSET_CODE


@dataclass
class TrustlineRequest:
    """
    A request to build and sign a change-trust operation.

    Attributes:
        secret_key: Secret seed of the account opening the trustline
        asset_code: Code of the issued asset
        asset_issuer: Issuer account id
        limit: Maximum balance to trust; service default when omitted
    """
    secret_key: Optional[str]
    asset_code: Optional[str]
    asset_issuer: Optional[str]
    limit: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.secret_key and self.asset_code and self.asset_issuer)


@dataclass(frozen=True)
class SubmissionResult:
    """Gateway acknowledgment of a submitted transaction."""
    transaction_id: str
    ledger: Optional[int]
    hash: str
