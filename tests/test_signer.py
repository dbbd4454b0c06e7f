"""
Test suite for keypair generation and transaction signing.
"""

import pytest
from stellar_sdk import Account, Keypair, StrKey, TransactionBuilder as StellarTxBuilder
from stellar_sdk.exceptions import Ed25519SecretSeedInvalidError

from stellar_service.tx.signer import TransactionSigner, generate_keypair


def _unsigned_envelope(keypair: Keypair, passphrase: str):
    return (
        StellarTxBuilder(
            source_account=Account(keypair.public_key, 1),
            network_passphrase=passphrase,
            base_fee=100,
        )
        .append_bump_sequence_op(bump_to=10)
        .set_timeout(30)
        .build()
    )


# ============================================================================
# Test Keypair Generation
# ============================================================================

class TestGenerateKeypair:
    """Tests for random keypair generation."""

    def test_keys_are_well_formed(self):
        generated = generate_keypair()

        assert StrKey.is_valid_ed25519_public_key(generated.public_key)
        assert StrKey.is_valid_ed25519_secret_seed(generated.secret_key)

    def test_secret_matches_public_key(self):
        generated = generate_keypair()

        assert Keypair.from_secret(generated.secret_key).public_key == generated.public_key

    def test_repeated_calls_are_distinct(self):
        generated = [generate_keypair() for _ in range(5)]

        assert len({k.public_key for k in generated}) == 5
        assert len({k.secret_key for k in generated}) == 5


# ============================================================================
# Test Transaction Signer
# ============================================================================

class TestTransactionSigner:
    """Tests for transaction signing functionality."""

    def test_from_secret(self, source_keypair):
        signer = TransactionSigner.from_secret(source_keypair.secret)

        assert signer.is_loaded is True
        assert signer.public_key == source_keypair.public_key

    def test_from_malformed_secret(self):
        with pytest.raises(Ed25519SecretSeedInvalidError):
            TransactionSigner.from_secret("SNOTAREALSECRET")

    def test_signer_not_loaded(self, source_keypair, test_config):
        signer = TransactionSigner()
        envelope = _unsigned_envelope(source_keypair, test_config.network_passphrase)

        assert signer.is_loaded is False
        with pytest.raises(RuntimeError, match="No signing key loaded"):
            signer.sign(envelope)

    def test_public_only_keypair_cannot_sign(self, source_keypair):
        signer = TransactionSigner(Keypair.from_public_key(source_keypair.public_key))

        assert signer.is_loaded is False

    def test_sign_transaction(self, source_keypair, test_config):
        signer = TransactionSigner.from_secret(source_keypair.secret)
        envelope = _unsigned_envelope(source_keypair, test_config.network_passphrase)

        signed = signer.sign(envelope)

        assert signed is envelope
        assert len(signed.signatures) == 1
        assert signed.signatures[0].signature_hint == source_keypair.signature_hint()
        source_keypair.verify(signed.hash(), signed.signatures[0].signature)
