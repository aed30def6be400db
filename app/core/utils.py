"""Shared utility functions for the Transaction Ingest API."""

import logging
from datetime import UTC, datetime

import colorlog

LOGGER_NAME = "transaction-ingest"


def get_logger(name: str) -> logging.Logger:
    """Get a logger with a colorized format for the project.

    Child loggers of the project logger propagate to it and share its handlers.
    """
    logger = logging.getLogger(name)
    if name.startswith(f"{LOGGER_NAME}."):
        return logger
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def utcnow_iso() -> str:
    """Get the current UTC time as an ISO8601 string."""
    return datetime.now(UTC).isoformat()


def truncate(text: str, limit: int) -> str:
    """Shorten text for log lines, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."
