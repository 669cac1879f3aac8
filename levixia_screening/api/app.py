# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI Application Factory.

This module provides the main application factory for the screening API.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from levixia_screening import __version__
from levixia_screening.api.routes import health
from levixia_screening.api.v1 import router as v1_router
from levixia_screening.core.config import get_settings
from levixia_screening.core.screening.config import get_screening_config
from levixia_screening.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Configures logging and loads the screening configuration once so a
    broken YAML file is reported at startup.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    settings = get_settings()
    setup_logging(settings)
    logger.info(
        "Starting screening API",
        extra={"environment": settings.environment, "debug": settings.debug},
    )

    get_screening_config()

    yield

    logger.info("Shutting down screening API")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Levixia Screening API",
        description="Rule-based screening for dyslexia-related learning differences",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    # =========================================================================
    # Routes
    # =========================================================================
    app.include_router(health.router, tags=["Health"])
    app.include_router(v1_router)

    return app


def run_server() -> None:  # pragma: no cover
    """Run the screening API with uvicorn using API_ settings."""
    import uvicorn

    api = get_settings().api
    uvicorn.run(
        "levixia_screening.api.app:create_app",
        factory=True,
        host=api.host,
        port=api.port,
        reload=api.reload,
    )
