"""Error taxonomy for transaction ingestion.

Validation problems are returned as ``ValidationFailure`` values so the validator stays total. Storage problems are raised by backends as ``StorageFailure`` and recovered at the endpoint.
"""

from dataclasses import dataclass
from enum import StrEnum

ROOT_FIELD = "$"


class ErrorKind(StrEnum):
    """Why raw input could not become a Transaction."""

    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    MALFORMED_PAYLOAD = "malformed_payload"
    FIELD_INVALID = "field_invalid"


@dataclass(frozen=True)
class FieldError:
    """A (field-path, reason) pair."""

    field: str
    reason: str


@dataclass(frozen=True)
class ValidationFailure:
    """Structured description of a rejected payload."""

    kind: ErrorKind
    errors: tuple[FieldError, ...]

    @classmethod
    def unsupported_media_type(cls, content_type: str | None) -> "ValidationFailure":
        """Build the failure for a content type that is not JSON."""
        received = content_type or "none"
        reason = f"Expected a JSON content type, got '{received}'"
        return cls(ErrorKind.UNSUPPORTED_MEDIA_TYPE, (FieldError(ROOT_FIELD, reason),))

    @classmethod
    def malformed_payload(cls, detail: str) -> "ValidationFailure":
        """Build the failure for a body that is not valid JSON."""
        return cls(ErrorKind.MALFORMED_PAYLOAD, (FieldError(ROOT_FIELD, f"Invalid JSON: {detail}"),))

    @classmethod
    def field_invalid(cls, errors: list[FieldError]) -> "ValidationFailure":
        """Build the failure for one or more schema violations."""
        return cls(ErrorKind.FIELD_INVALID, tuple(errors))

    def fields(self) -> list[str]:
        """Field paths named by this failure, in order."""
        return [error.field for error in self.errors]


class StorageFailure(Exception):
    """A storage backend could not persist a transaction.

    ``detail`` is backend-defined and only ever logged.
    """

    def __init__(self, detail: str) -> None:
        """Initialize with the backend's description of the problem."""
        super().__init__(detail)
        self.detail = detail
