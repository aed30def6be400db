"""Store registry for selecting the storage backend by name.

Backends register under a short name so the configured ``storage_backend`` setting can pick one at startup.
"""

from typing import ClassVar

from app.core.settings import Settings
from app.stores.base import TransactionStore


class StoreRegistry:
    """Registry for transaction store classes."""

    _registry: ClassVar[dict[str, type[TransactionStore]]] = {}

    @classmethod
    def register(cls, name: str, store_cls: type[TransactionStore]) -> None:
        """Register a store class with a given name."""
        cls._registry[name] = store_cls

    @classmethod
    def get(cls, name: str) -> type[TransactionStore]:
        """Retrieve a store class by name."""
        try:
            return cls._registry[name]
        except KeyError:
            msg = f"Unknown storage backend '{name}', expected one of {cls.available()}"
            raise ValueError(msg) from None

    @classmethod
    def available(cls) -> list[str]:
        """List all available store names."""
        return sorted(cls._registry.keys())


def build_store(settings: Settings) -> TransactionStore:
    """Instantiate the storage backend named by the settings."""
    return StoreRegistry.get(settings.storage_backend)(settings)
