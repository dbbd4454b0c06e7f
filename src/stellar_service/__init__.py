"""
Stellar Transaction Service

A thin HTTP facade over the Stellar SDK. Generates keypairs, builds and
signs payment and trustline transactions, and submits signed envelopes
to a Horizon gateway.
"""

__version__ = "0.1.0"

from stellar_service.config import NetworkType, ServiceConfig
from stellar_service.core.models import (
    GeneratedKeypair,
    PaymentRequest,
    SubmissionResult,
    TrustlineRequest,
)

__all__ = [
    "GeneratedKeypair",
    "NetworkType",
    "PaymentRequest",
    "ServiceConfig",
    "SubmissionResult",
    "TrustlineRequest",
]
