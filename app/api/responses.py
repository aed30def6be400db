"""Mapping from ingestion outcomes to HTTP responses.

Every endpoint that validates and stores goes through ``outcome_to_response`` so failures look the same everywhere.
"""

from typing import Any

from fastapi import Response, status
from fastapi.responses import JSONResponse

from app.core.errors import ErrorKind, StorageFailure, ValidationFailure

STORAGE_FAILURE_MESSAGE = "There was a problem storing the transaction."
INTERNAL_ERROR_MESSAGE = "Internal server error"

KIND_STATUS = {
    ErrorKind.UNSUPPORTED_MEDIA_TYPE: status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    ErrorKind.MALFORMED_PAYLOAD: status.HTTP_400_BAD_REQUEST,
    ErrorKind.FIELD_INVALID: status.HTTP_400_BAD_REQUEST,
}

Outcome = ValidationFailure | StorageFailure | None


def validation_body(failure: ValidationFailure) -> dict[str, Any]:
    """Encode a validation failure as a machine-parseable body."""
    return {
        "kind": failure.kind.value,
        "errors": [{"field": error.field, "reason": error.reason} for error in failure.errors],
    }


def outcome_to_response(
    outcome: Outcome,
    storage_failure_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
) -> tuple[int, dict[str, Any] | None]:
    """Map an ingestion outcome to a status code and body; ``None`` means stored."""
    if outcome is None:
        return status.HTTP_200_OK, None
    if isinstance(outcome, ValidationFailure):
        return KIND_STATUS[outcome.kind], validation_body(outcome)
    if isinstance(outcome, StorageFailure):
        return storage_failure_status, {"message": STORAGE_FAILURE_MESSAGE}
    msg = f"Unsupported outcome type: {type(outcome).__name__}"
    raise TypeError(msg)


def to_http_response(
    outcome: Outcome,
    storage_failure_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
) -> Response:
    """Build the FastAPI response for an ingestion outcome."""
    status_code, body = outcome_to_response(outcome, storage_failure_status)
    if body is None:
        return Response(status_code=status_code)
    return JSONResponse(body, status_code=status_code)
