# src/crud_example/main.py
"""
Application factory.

Run locally with:
    uvicorn crud_example.main:create_app --factory --reload
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from crud_example.api.error_handlers import register_exception_handlers
from crud_example.api.v1.router import api_router
from crud_example.config.settings import Settings, get_settings
from crud_example.core.logging import RequestIDMiddleware, setup_logging, stop_queue_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("app.startup", extra={"app_name": app.title})
    yield
    logger.info("app.shutdown", extra={"app_name": app.title})
    stop_queue_logging()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.add_middleware(RequestIDMiddleware)
    app.include_router(api_router, prefix=settings.API_PREFIX)
    register_exception_handlers(app)
    return app
