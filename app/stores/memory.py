"""In-process transaction store, useful for development and tests."""

import threading

from app.core.models import StoredTransaction, Transaction
from app.core.settings import Settings
from app.stores.base import TransactionStore


class InMemoryTransactionStore(TransactionStore):
    """Keeps stored transactions in a list for the lifetime of the process."""

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize an empty store. Settings are accepted for registry compatibility."""
        _ = settings
        self._records: list[StoredTransaction] = []
        self._lock = threading.Lock()

    def store(self, transaction: Transaction) -> StoredTransaction:
        """Append the transaction to the in-memory list."""
        record = self.new_record(transaction)
        with self._lock:
            self._records.append(record)
        return record

    def list_all(self) -> list[StoredTransaction]:
        """Return every stored transaction, oldest first."""
        with self._lock:
            return list(self._records)

    def clear(self) -> None:
        """Drop all stored transactions."""
        with self._lock:
            self._records.clear()
