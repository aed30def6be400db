"""API package: provides FastAPI dependencies, route definitions, and error handling for the application."""

from .dependencies import get_app_settings, get_store  # noqa: F401
from .errors import install_error_handlers  # noqa: F401
from .routes import router  # noqa: F401
