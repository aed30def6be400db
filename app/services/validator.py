"""Request validation for the ingestion endpoint.

``validate_transaction`` turns a raw request body plus its declared content type into either a ``Transaction`` or a ``ValidationFailure``. It is pure and total: it never raises, never logs, and returns equal results for equal inputs, so the endpoint can call it without guarding.
"""

import json
from functools import lru_cache

from pydantic import Field, ValidationError, create_model

from app.core.errors import ROOT_FIELD, FieldError, ValidationFailure
from app.core.models import Transaction
from app.core.settings import Settings

JSON_MEDIA_TYPES = frozenset({"application/json", "text/json"})
DEFAULT_BOUNDS = (1, 500, 0.0)


def is_json_content_type(content_type: str | None) -> bool:
    """Check whether a Content-Type header declares JSON, ignoring parameters and case."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type in JSON_MEDIA_TYPES:
        return True
    return media_type.startswith("application/") and media_type.endswith("+json")


def _reject_constant(name: str) -> float:
    msg = f"non-standard constant '{name}'"
    raise ValueError(msg)


def parse_document(payload: bytes | str) -> object:
    """Parse a payload as strict JSON, raising ValueError on anything malformed."""
    try:
        return json.loads(payload, parse_constant=_reject_constant)
    except RecursionError as exc:
        msg = "document is nested too deeply"
        raise ValueError(msg) from exc


@lru_cache(maxsize=8)
def transaction_schema(item_min_length: int, item_max_length: int, min_cost: float) -> type[Transaction]:
    """Return the Transaction model enforcing the given bounds."""
    if (item_min_length, item_max_length, min_cost) == DEFAULT_BOUNDS:
        return Transaction
    return create_model(
        "Transaction",
        __base__=Transaction,
        item=(str, Field(strict=True, min_length=item_min_length, max_length=item_max_length)),
        cost=(float, Field(strict=True, ge=min_cost, allow_inf_nan=False)),
    )


def _field_errors(exc: ValidationError) -> list[FieldError]:
    errors = []
    for error in exc.errors(include_url=False):
        path = ".".join(str(part) for part in error["loc"]) or ROOT_FIELD
        errors.append(FieldError(path, error["msg"]))
    return errors


def validate_transaction(
    payload: bytes | str,
    content_type: str | None,
    settings: Settings | None = None,
) -> Transaction | ValidationFailure:
    """Validate a raw request body as a Transaction.

    Every invalid field is reported, not just the first one. Fields other than
    ``item`` and ``cost`` are ignored, and a top-level value that is not an
    object is treated as an object with no fields.
    """
    if not is_json_content_type(content_type):
        return ValidationFailure.unsupported_media_type(content_type)
    try:
        document = parse_document(payload)
    except ValueError as exc:
        return ValidationFailure.malformed_payload(str(exc))
    if not isinstance(document, dict):
        document = {}
    bounds = (
        (settings.item_min_length, settings.item_max_length, settings.min_cost) if settings else DEFAULT_BOUNDS
    )
    schema = transaction_schema(*bounds)
    try:
        validated = schema.model_validate(document)
    except ValidationError as exc:
        return ValidationFailure.field_invalid(_field_errors(exc))
    if schema is Transaction:
        return validated
    return Transaction.model_construct(item=validated.item, cost=validated.cost)
