"""
Transaction Signer - handles transaction signing.

Wraps a Stellar keypair derived from a caller-supplied secret seed.
Keys live only for the duration of a request and are never persisted.
"""

from typing import Optional, Union

import structlog

from stellar_sdk import FeeBumpTransactionEnvelope, Keypair, TransactionEnvelope

from stellar_service.core.models import GeneratedKeypair
from stellar_service.log import short_key

logger = structlog.get_logger(__name__)


class TransactionSigner:
    """
    Signs transaction envelopes with a single keypair.

    Usage:
        ```python
        signer = TransactionSigner.from_secret("S...")
        signer.sign(envelope)
        ```
    """

    def __init__(self, keypair: Optional[Keypair] = None):
        """
        Initialize the transaction signer.

        Args:
            keypair: Keypair holding the signing seed
        """
        self._keypair = keypair

    @classmethod
    def from_secret(cls, secret: str) -> "TransactionSigner":
        """
        Create a signer from a secret seed.

        Args:
            secret: Secret seed (S...)

        Raises:
            stellar_sdk.exceptions.Ed25519SecretSeedInvalidError: If the seed is malformed
        """
        return cls(Keypair.from_secret(secret))

    @property
    def public_key(self) -> Optional[str]:
        """Get the signer's account id."""
        return self._keypair.public_key if self._keypair else None

    @property
    def is_loaded(self) -> bool:
        """Check if a signing key is loaded."""
        return self._keypair is not None and self._keypair.can_sign()

    def sign(
        self,
        envelope: Union[TransactionEnvelope, FeeBumpTransactionEnvelope],
    ) -> Union[TransactionEnvelope, FeeBumpTransactionEnvelope]:
        """
        Sign a transaction envelope in place.

        Args:
            envelope: The envelope to sign

        Returns:
            The same envelope, carrying the new signature
        """
        if not self.is_loaded:
            raise RuntimeError("No signing key loaded")

        envelope.sign(self._keypair)

        logger.debug(
            "transaction_signed",
            signer=short_key(self.public_key),
            tx_hash=envelope.hash_hex()[:16] + "...",
        )

        return envelope


def generate_keypair() -> GeneratedKeypair:
    """
    Generate a new random keypair.

    The keypair is returned to the caller and not stored anywhere.
    """
    keypair = Keypair.random()

    logger.info("keypair_generated", public_key=short_key(keypair.public_key))

    return GeneratedKeypair(
        public_key=keypair.public_key,
        secret_key=keypair.secret,
    )
