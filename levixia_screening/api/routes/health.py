# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Health and readiness endpoints.

The engine has no backing services. Readiness reports whether the
screening configuration came from YAML or from built-in defaults and
whether a narrative model is configured.
"""

import time
from datetime import datetime
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from levixia_screening import __version__
from levixia_screening.core.config import get_settings
from levixia_screening.core.screening.config import get_screening_config
from levixia_screening.utils.datetime import utc_now

router = APIRouter()

# Process start, for uptime
_server_start_time = time.time()


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(description="Current server timestamp")
    version: str = Field(description="API version")
    environment: str = Field(description="Deployment environment")
    uptime_seconds: int = Field(description="Server uptime in seconds")
    narrative_enabled: bool = Field(description="Whether narrative reports are requested")


class ReadinessResponse(BaseModel):
    """Readiness check response model."""
    ready: bool = Field(description="Whether screenings can be served")
    checks: dict[str, Any] = Field(description="Individual check results")


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report liveness and basic deployment facts."""
    settings = get_settings()

    return HealthResponse(
        status="healthy",
        timestamp=utc_now(),
        version=__version__,
        environment=settings.environment,
        uptime_seconds=int(time.time() - _server_start_time),
        narrative_enabled=settings.report.narrative_enabled,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """Check whether screenings can be served.

    Built-in defaults keep the engine usable, so a missing or broken
    YAML file is reported but does not make the service unready.

    Returns:
        ReadinessResponse with individual check results.
    """
    settings = get_settings()
    config = get_screening_config()

    checks: dict[str, Any] = {
        "screening_config": {
            "status": "yaml" if config.source is not None else "defaults",
            "accessibility_categories": len(config.accessibility),
        },
        "narrative": {
            "enabled": settings.report.narrative_enabled,
            "model": settings.llm.model if settings.report.narrative_enabled else None,
        },
    }

    return ReadinessResponse(ready=bool(config.accessibility), checks=checks)
