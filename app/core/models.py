"""Pydantic models for the Transaction Ingest API.

This module defines the Transaction domain model accepted by the ingestion endpoint, the record a storage backend returns after persisting it, and the response body shapes documented in the OpenAPI schema.
"""

from pydantic import BaseModel, ConfigDict, Field


class Transaction(BaseModel):
    """A validated register transaction: an item name and its cost."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    item: str = Field(strict=True, min_length=1, max_length=500)
    cost: float = Field(strict=True, ge=0.0, allow_inf_nan=False)


class StoredTransaction(BaseModel):
    """A transaction as persisted by a storage backend."""

    model_config = ConfigDict(frozen=True)

    id: str
    item: str
    cost: float
    stored_at: str


class FieldErrorBody(BaseModel):
    """One field-level problem in a rejected request."""

    field: str
    reason: str


class ValidationErrorBody(BaseModel):
    """Response body for a request that failed validation."""

    kind: str
    errors: list[FieldErrorBody]


class MessageBody(BaseModel):
    """Response body carrying a single client-safe message."""

    message: str
