"""Stores package: provides the storage collaborator interface, its backends, and the backend registry."""

from .base import TransactionStore
from .memory import InMemoryTransactionStore
from .registry import StoreRegistry, build_store
from .s3 import S3TransactionStore
from .sql import SQLTransactionStore

StoreRegistry.register("memory", InMemoryTransactionStore)
StoreRegistry.register("sql", SQLTransactionStore)
StoreRegistry.register("s3", S3TransactionStore)

__all__ = [
    "InMemoryTransactionStore",
    "S3TransactionStore",
    "SQLTransactionStore",
    "StoreRegistry",
    "TransactionStore",
    "build_store",
]
