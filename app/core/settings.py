"""Configuration and environment settings for the Transaction Ingest API."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

STORAGE_FAILURE_STATUSES = (400, 500)


class Settings(BaseSettings):
    """Application settings for the Transaction Ingest API."""

    item_min_length: int = 1
    item_max_length: int = 500
    min_cost: float = 0.0
    storage_backend: str = "sql"
    database_url: str = "sqlite:///transactions.db"
    s3_endpoint_url: str | None = None
    s3_access_key: str | None = None
    s3_secret_key: str | None = None
    s3_bucket: str = "transactions"
    s3_prefix: str = "transactions/"
    storage_failure_status: int = 500
    log_dir: str = "logs"
    log_level: str = "INFO"
    server_host: str = "127.0.0.1"
    server_port: int = 8000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("storage_failure_status")
    @classmethod
    def check_storage_failure_status(cls, value: int) -> int:
        """Storage failures are reported as either a client or a server error."""
        if value not in STORAGE_FAILURE_STATUSES:
            msg = f"storage_failure_status must be one of {STORAGE_FAILURE_STATUSES}, got {value}"
            raise ValueError(msg)
        return value


def get_settings() -> "Settings":
    """Return an instance of the application settings."""
    return Settings()
