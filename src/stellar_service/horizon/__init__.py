"""
Gateway Integration Layer.

Provides abstracted access to Stellar account state and transaction submission.
"""

from stellar_service.horizon.interface import (
    AccountNotFoundError,
    HorizonConnectionError,
    HorizonError,
    HorizonInterface,
    SubmitResponse,
    TransactionSubmitError,
)
from stellar_service.horizon.adapter import HorizonAdapter

__all__ = [
    "AccountNotFoundError",
    "HorizonAdapter",
    "HorizonConnectionError",
    "HorizonError",
    "HorizonInterface",
    "SubmitResponse",
    "TransactionSubmitError",
]
