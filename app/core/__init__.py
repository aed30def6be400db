"""Core package: provides models, error types, settings, and shared utilities."""

from .errors import ErrorKind, FieldError, StorageFailure, ValidationFailure  # noqa: F401
from .models import StoredTransaction, Transaction  # noqa: F401
from .settings import Settings  # noqa: F401
from .utils import get_logger  # noqa: F401
