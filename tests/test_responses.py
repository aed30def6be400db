"""Unit tests for the outcome-to-response mapping."""

from app.api.responses import STORAGE_FAILURE_MESSAGE, outcome_to_response, to_http_response
from app.core.errors import ErrorKind, FieldError, StorageFailure, ValidationFailure

HTTP_200_OK = 200
HTTP_400_BAD_REQUEST = 400
HTTP_415_UNSUPPORTED_MEDIA_TYPE = 415
HTTP_500_INTERNAL_SERVER_ERROR = 500


def test_stored_outcome_is_empty_success() -> None:
    """No failure maps to 200 with no body."""
    if outcome_to_response(None) != (HTTP_200_OK, None):
        msg = f"Expected (200, None), got {outcome_to_response(None)}"
        raise AssertionError(msg)
    response = to_http_response(None)
    if response.status_code != HTTP_200_OK or response.body != b"":
        msg = f"Expected an empty 200 response, got {response.status_code} {response.body!r}"
        raise AssertionError(msg)


def test_validation_failures_map_by_kind() -> None:
    """Each validation kind has its status and a structured body."""
    cases = [
        (ValidationFailure.unsupported_media_type("text/plain"), HTTP_415_UNSUPPORTED_MEDIA_TYPE),
        (ValidationFailure.malformed_payload("Expecting value"), HTTP_400_BAD_REQUEST),
        (
            ValidationFailure.field_invalid([FieldError("item", "too short"), FieldError("cost", "negative")]),
            HTTP_400_BAD_REQUEST,
        ),
    ]
    for failure, expected_status in cases:
        status_code, body = outcome_to_response(failure)
        if status_code != expected_status:
            msg = f"Expected {expected_status} for {failure.kind}, got {status_code}"
            raise AssertionError(msg)
        if body["kind"] != failure.kind.value:
            msg = f"Expected kind {failure.kind.value}, got {body['kind']}"
            raise AssertionError(msg)
        expected_errors = [{"field": e.field, "reason": e.reason} for e in failure.errors]
        if body["errors"] != expected_errors:
            msg = f"Expected errors {expected_errors}, got {body['errors']}"
            raise AssertionError(msg)


def test_unsupported_media_type_names_received_type() -> None:
    """The unsupported media type reason mentions what the client sent."""
    _, body = outcome_to_response(ValidationFailure.unsupported_media_type("text/plain"))
    if body["kind"] != ErrorKind.UNSUPPORTED_MEDIA_TYPE.value or "text/plain" not in body["errors"][0]["reason"]:
        msg = f"Unexpected body: {body}"
        raise AssertionError(msg)


def test_storage_failure_hides_detail() -> None:
    """A storage failure body never contains the backend's detail."""
    failure = StorageFailure("password=hunter2 connection refused")
    for policy in (HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR):
        status_code, body = outcome_to_response(failure, policy)
        if status_code != policy:
            msg = f"Expected status {policy}, got {status_code}"
            raise AssertionError(msg)
        if body != {"message": STORAGE_FAILURE_MESSAGE}:
            msg = f"Expected the generic storage message, got {body}"
            raise AssertionError(msg)


def test_default_storage_failure_status_is_server_error() -> None:
    """Without a policy, storage failures are reported as 500."""
    status_code, _ = outcome_to_response(StorageFailure("boom"))
    if status_code != HTTP_500_INTERNAL_SERVER_ERROR:
        msg = f"Expected 500, got {status_code}"
        raise AssertionError(msg)
