"""
Abstract interface for Horizon gateway integration.

Defines the contract for ledger access that all gateway adapters must implement.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

from stellar_sdk import Account, FeeBumpTransactionEnvelope, TransactionEnvelope


class HorizonInterface(ABC):
    """
    Abstract interface for Stellar ledger access.

    This interface defines the gateway operations needed by the service:
    - Account state queries
    - Transaction submission
    """

    @abstractmethod
    async def connect(self) -> None:
        """
        Establish connection to the gateway.

        Raises:
            HorizonConnectionError: If connection cannot be established
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Close connection to the gateway."""
        pass

    @abstractmethod
    async def get_account(self, account_id: str) -> Dict[str, Any]:
        """
        Get the raw account record.

        Args:
            account_id: Public key (G...) of the account

        Returns:
            Account record as returned by the gateway

        Raises:
            AccountNotFoundError: If the account does not exist on the ledger
        """
        pass

    @abstractmethod
    async def submit_transaction(
        self,
        envelope: Union[TransactionEnvelope, FeeBumpTransactionEnvelope],
    ) -> "SubmitResponse":
        """
        Submit a signed transaction to the network.

        Args:
            envelope: Signed transaction envelope

        Returns:
            Gateway acknowledgment

        Raises:
            TransactionSubmitError: If the gateway rejects the transaction
        """
        pass

    async def load_account(self, account_id: str) -> Account:
        """
        Load an account as a transaction source.

        Args:
            account_id: Public key (G...) of the account

        Returns:
            SDK account carrying the current sequence number
        """
        data = await self.get_account(account_id)
        return Account(account_id, int(data["sequence"]))


class SubmitResponse(dict):
    """Gateway acknowledgment of a submitted transaction."""

    @property
    def transaction_id(self) -> Optional[str]:
        return self.get("id")

    @property
    def ledger(self) -> Optional[int]:
        return self.get("ledger")

    @property
    def hash(self) -> Optional[str]:
        return self.get("hash")


class HorizonError(Exception):
    """Base class for gateway failures."""
    pass


class HorizonConnectionError(HorizonError):
    """Raised when the gateway cannot be reached or answers unexpectedly."""
    pass


class AccountNotFoundError(HorizonError):
    """Raised when an account does not exist on the ledger."""

    def __init__(self, account_id: str):
        super().__init__(f"Account not found: {account_id}")
        self.account_id = account_id


class TransactionSubmitError(HorizonError):
    """Raised when transaction submission fails."""

    def __init__(self, message: str, result_codes: Optional[dict] = None):
        super().__init__(message)
        self.result_codes = result_codes or {}
