"""
Transaction module.

Handles transaction construction, signing, and envelope decoding.
"""

from stellar_service.tx.builder import (
    TransactionBuilder,
    TransactionBuildError,
    parse_envelope,
    resolve_asset,
)
from stellar_service.tx.signer import TransactionSigner, generate_keypair

__all__ = [
    "TransactionBuilder",
    "TransactionBuildError",
    "TransactionSigner",
    "generate_keypair",
    "parse_envelope",
    "resolve_asset",
]
