"""Base storage abstraction for validated transactions.

This module defines the abstract base class every storage backend implements. The ingestion endpoint depends only on ``store``: it returns the stored record on success and raises ``StorageFailure`` otherwise.
"""

import uuid
from abc import ABC, abstractmethod

from app.core.models import StoredTransaction, Transaction
from app.core.utils import utcnow_iso


class TransactionStore(ABC):
    """Abstract base class for all transaction storage backends."""

    @abstractmethod
    def store(self, transaction: Transaction) -> StoredTransaction:
        """Persist a transaction, raising StorageFailure if it cannot be stored."""

    def close(self) -> None:
        """Release any resources held by the backend."""

    @staticmethod
    def new_record(transaction: Transaction) -> StoredTransaction:
        """Stamp a transaction with a fresh id and storage time."""
        return StoredTransaction(
            id=str(uuid.uuid4()),
            item=transaction.item,
            cost=transaction.cost,
            stored_at=utcnow_iso(),
        )
