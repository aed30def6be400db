"""Main entrypoint and application factory for the Transaction Ingest API.

This module initializes the FastAPI application, configures logging, installs the JSON error handlers, prepares the storage backend, and exposes the Scalar API reference endpoint for interactive OpenAPI documentation. It also includes the main entrypoint for running the app with Uvicorn.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from scalar_fastapi import get_scalar_api_reference

from app.api.dependencies import get_store
from app.api.errors import install_error_handlers
from app.api.routes import router
from app.core.settings import get_settings
from app.core.utils import LOGGER_NAME, get_logger


# --- Logging Setup ---
def setup_logging() -> None:
    """Configure logging to file and console, and ensure the log directory exists."""
    settings = get_settings()
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    logger = get_logger(LOGGER_NAME)
    logger.setLevel(settings.log_level.upper())
    # Add file handler for persistent logs (not colorized)
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        file_handler = logging.FileHandler(log_dir / "ingest.log")
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(file_handler)
    logger.propagate = False


setup_logging()
logger = get_logger(LOGGER_NAME)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the configured storage backend on startup and release it on shutdown."""
    _ = app  # Silence unused argument warning
    settings = get_settings()
    store = get_store()
    logger.info(f"Storage backend ready: {settings.storage_backend} ({type(store).__name__})")
    yield
    store.close()
    get_store.cache_clear()


app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="Transaction Ingest API",
    description="""
    The Transaction Ingest API validates register transactions sent as JSON and stores them.

    **Endpoints:**
    - `POST /api/transactions`: Validate and store a transaction. Errors are returned as structured JSON.
    - `GET /health`: Health check endpoint.
    - `GET /scalar`: Interactive Scalar OpenAPI documentation.
    """,
    version="1.0.0",
)
install_error_handlers(app)
app.include_router(router)


@app.get("/scalar", include_in_schema=False)
async def scalar_docs() -> HTMLResponse:
    """Return Scalar API reference."""
    return get_scalar_api_reference(openapi_url=app.openapi_url, title=app.title)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("main:app", host=settings.server_host, port=settings.server_port, reload=True)
