"""
FastAPI application entry point for the QuickEx backend.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from quickex.config import Settings, get_settings
from quickex.errors import (
    APIError,
    api_error_handler,
    generic_error_handler,
    validation_error_handler,
)
from quickex.routes import router
from quickex.store import SupabaseStore

logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "health", "description": "Health check endpoints"},
    {"name": "usernames", "description": "Username management endpoints"},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("QuickEx backend started")
    logger.info("Network: %s", settings.network)
    yield
    logger.info("Backend shutting down")


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[SupabaseStore] = None,
) -> FastAPI:
    """
    Build the application. Settings and the store handle are constructed here,
    so a misconfigured environment fails before the server starts listening.
    """
    settings = settings or get_settings()
    store = store or SupabaseStore.from_settings(settings)

    app = FastAPI(
        title="QuickEx Backend",
        description=(
            "QuickEx API documentation - A Stellar-based exchange platform. "
            f"Currently connected to: {settings.network}"
        ),
        version="v1",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    app.include_router(router)
    return app
