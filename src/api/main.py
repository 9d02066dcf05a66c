"""HTTP service entrypoint."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import uvicorn
from fastapi import FastAPI

from src.app import App, create_app
from src.api.routes import router
from src.config.logging import configure_logging
from src.config.settings import load_settings

logger = logging.getLogger(__name__)

SERVICE_NAME = "Salesforce SOQL Translator"
SERVICE_VERSION = "1.0.0"


def create_api(app: App | None = None) -> FastAPI:
    """Create the FastAPI application.

    When `app` is omitted, settings are loaded and the container is built at startup.
    """

    @asynccontextmanager
    async def lifespan(api: FastAPI):
        if getattr(api.state, "app", None) is None:
            settings = load_settings()
            configure_logging(settings.log_level)
            api.state.app = create_app(settings)
        logger.info(
            "started objects=%d llm=%s",
            len(api.state.app.catalog),
            "on" if api.state.app.llm_config is not None else "off",
        )
        yield
        logger.info("shutting down")

    api = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION, lifespan=lifespan)
    api.state.app = app
    api.include_router(router)

    @api.get("/health")
    async def health():
        return {
            "status": "healthy",
            "timestamp": datetime.now(UTC).isoformat(),
            "version": SERVICE_VERSION,
            "service": SERVICE_NAME,
        }

    return api


def main() -> None:
    """Run the HTTP service."""

    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        create_api(create_app(settings)),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
