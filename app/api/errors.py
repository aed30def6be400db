"""Application-wide error handlers.

Framework client errors keep their status but get a ``{"message": ...}`` body. Anything uncaught becomes a generic 500 so exception text never reaches the client.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.responses import INTERNAL_ERROR_MESSAGE
from app.core.utils import get_logger

logger = get_logger("transaction-ingest.api")


async def client_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors as JSON message bodies."""
    logger.info(f"Client error {exc.status_code} on {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse({"message": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers)


async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected exception and return a generic 500 body."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse({"message": INTERNAL_ERROR_MESSAGE}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def install_error_handlers(app: FastAPI) -> None:
    """Register the JSON error handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, client_error_handler)
    app.add_exception_handler(Exception, server_error_handler)
