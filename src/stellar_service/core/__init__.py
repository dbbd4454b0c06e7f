"""
Core module containing the transient request/result models and errors.
"""

from stellar_service.core.errors import InvalidRequestError
from stellar_service.core.models import (
    GeneratedKeypair,
    PaymentRequest,
    SubmissionResult,
    TrustlineRequest,
)

__all__ = [
    "GeneratedKeypair",
    "InvalidRequestError",
    "PaymentRequest",
    "SubmissionResult",
    "TrustlineRequest",
]
