"""FastAPI application entry point."""

from fastapi import FastAPI

from .api.errors import register_error_handlers
from .config import AppConfig, load_config
from .dependencies import include_routers
from .logging import configure_logging


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Build FastAPI instance with configured dependencies."""
    cfg = config or load_config()
    configure_logging(cfg.log_level)
    app = FastAPI(title="Store Backoffice")
    register_error_handlers(app)
    include_routers(app, cfg)
    return app
