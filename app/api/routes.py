"""FastAPI endpoints for the Transaction Ingest API.

This module defines the transaction ingestion route and the health check. Ingestion reads the raw body so the validator sees exactly what the client sent, including the declared content type.
"""

from fastapi import APIRouter, Depends, Request, Response

from app.api.dependencies import get_app_settings, get_store
from app.api.responses import to_http_response
from app.core.errors import StorageFailure, ValidationFailure
from app.core.models import MessageBody, ValidationErrorBody
from app.core.settings import Settings
from app.core.utils import get_logger, truncate
from app.services.validator import validate_transaction
from app.stores import TransactionStore

router = APIRouter()
logger = get_logger("transaction-ingest.api")

MAX_BODY_LOG_LEN = 300


@router.post(
    "/api/transactions",
    summary="Store a register transaction",
    description=(
        "Validate a JSON transaction and store it.\n\n"
        "**Request:**\n"
        "- Content-Type: application/json\n"
        '- Body: `{"item": <string, 1-500 chars>, "cost": <number >= 0>}`; other fields are ignored.\n\n'
        "**Response:**\n"
        "- 200 OK: empty body, the transaction was stored.\n"
        "- 400 Bad Request: malformed JSON or invalid fields; every invalid field is listed.\n"
        "- 415 Unsupported Media Type: the body was not declared as JSON.\n"
        "- 500 Internal Server Error: the transaction could not be stored."
    ),
    response_class=Response,
    responses={
        200: {"description": "Transaction stored. Empty body."},
        400: {
            "model": ValidationErrorBody,
            "description": "Malformed JSON or invalid fields.",
            "content": {
                "application/json": {
                    "example": {
                        "kind": "field_invalid",
                        "errors": [
                            {"field": "item", "reason": "String should have at least 1 character"},
                            {"field": "cost", "reason": "Input should be greater than or equal to 0"},
                        ],
                    }
                }
            },
        },
        415: {"model": ValidationErrorBody, "description": "Body not declared as JSON."},
        500: {
            "model": MessageBody,
            "description": "Storage failure or unexpected error.",
            "content": {"application/json": {"example": {"message": "There was a problem storing the transaction."}}},
        },
    },
)
async def store_transaction(
    request: Request,
    store: TransactionStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Validate the request body as a Transaction and hand it to the store."""
    payload = await request.body()
    content_type = request.headers.get("content-type")
    result = validate_transaction(payload, content_type, settings)
    if isinstance(result, ValidationFailure):
        body_preview = truncate(payload.decode("utf-8", errors="replace"), MAX_BODY_LOG_LEN)
        logger.warning(f"Rejected transaction ({result.kind.value}): fields={result.fields()}, body={body_preview!r}")
        return to_http_response(result, settings.storage_failure_status)
    outcome = None
    try:
        record = store.store(result)
    except StorageFailure as failure:
        logger.error(f"Storage failure for item={result.item!r}: {failure.detail}")
        outcome = failure
    else:
        logger.info(f"Stored transaction: id={record.id}, item={record.item!r}, cost={record.cost}")
    return to_http_response(outcome, settings.storage_failure_status)


@router.get(
    "/health",
    summary="Health check",
    description="Simple health check endpoint. Returns status ok.",
    response_description="Status ok.",
    responses={200: {"description": "API is healthy.", "content": {"application/json": {"example": {"status": "ok"}}}}},
)
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}
