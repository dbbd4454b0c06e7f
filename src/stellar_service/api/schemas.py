"""
Request and response bodies for the HTTP API.

Field names on the wire are camelCase. Every request field is optional at
the schema level so that missing parameters are reported by the service
with its own 400 message instead of a schema error.
"""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stellar_service.core.models import (
    NATIVE_ASSET_CODE,
    GeneratedKeypair,
    PaymentRequest,
    SubmissionResult,
    TrustlineRequest,
)


def _numeric_to_str(value: Any) -> Any:
    """Accept JSON numbers for amounts and limits."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    return value


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class PaymentBody(_Body):
    """POST /api/create-payment"""
    source_secret: Optional[str] = Field(default=None, alias="sourceSecret")
    destination_address: Optional[str] = Field(default=None, alias="destinationAddress")
    amount: Optional[str] = None
    asset_code: Optional[str] = Field(default=NATIVE_ASSET_CODE, alias="assetCode")
    asset_issuer: Optional[str] = Field(default=None, alias="assetIssuer")

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> Any:
        # A numeric zero counts as a missing amount, like an empty string.
        if not isinstance(value, bool) and isinstance(value, (int, float, Decimal)) and value == 0:
            return None
        return _numeric_to_str(value)

    def to_request(self) -> PaymentRequest:
        return PaymentRequest(
            source_secret=self.source_secret,
            destination_address=self.destination_address,
            amount=self.amount,
            asset_code=self.asset_code,
            asset_issuer=self.asset_issuer,
        )


class TrustlineBody(_Body):
    """POST /api/create-trustline"""
    secret_key: Optional[str] = Field(default=None, alias="secretKey")
    asset_code: Optional[str] = Field(default=None, alias="assetCode")
    asset_issuer: Optional[str] = Field(default=None, alias="assetIssuer")
    limit: Optional[str] = None

    @field_validator("limit", mode="before")
    @classmethod
    def coerce_limit(cls, value: Any) -> Any:
        return _numeric_to_str(value)

    def to_request(self) -> TrustlineRequest:
        return TrustlineRequest(
            secret_key=self.secret_key,
            asset_code=self.asset_code,
            asset_issuer=self.asset_issuer,
            limit=self.limit,
        )


class SubmitBody(_Body):
    """POST /api/submit-transaction"""
    signed_xdr: Optional[str] = Field(default=None, alias="signedXDR")


class KeypairResponse(_Body):
    success: bool = True
    public_key: str = Field(alias="publicKey")
    secret_key: str = Field(alias="secretKey")

    @classmethod
    def from_keypair(cls, keypair: GeneratedKeypair) -> "KeypairResponse":
        return cls(public_key=keypair.public_key, secret_key=keypair.secret_key)


class SignedTransactionResponse(_Body):
    success: bool = True
    signed_xdr: str = Field(alias="signedXDR")


class SubmissionResponse(_Body):
    success: bool = True
    transaction_id: Optional[str] = Field(default=None, alias="transactionId")
    ledger: Optional[int] = None
    hash: Optional[str] = None

    @classmethod
    def from_result(cls, result: SubmissionResult) -> "SubmissionResponse":
        return cls(
            transaction_id=result.transaction_id,
            ledger=result.ledger,
            hash=result.hash,
        )


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
