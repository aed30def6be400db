"""FastAPI dependencies for DI (settings, storage backend).

This module provides dependency injection helpers so endpoints can be tested with a swapped storage collaborator via ``app.dependency_overrides``.
"""

from functools import lru_cache

from app.core.settings import Settings, get_settings
from app.stores import TransactionStore, build_store


@lru_cache(maxsize=1)
def get_store() -> TransactionStore:
    """Provide the configured TransactionStore, built once per process."""
    return build_store(get_settings())


def get_app_settings() -> Settings:
    """Provide the application settings for dependency injection."""
    return get_settings()
