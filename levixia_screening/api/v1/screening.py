# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Screening API endpoints.

This module provides endpoints for running a screening:
- POST / - Classify a submission and attach a report
- POST /evaluate - Classify a submission, structured result only

Example:
    POST /api/v1/screening
    {
        "reading": {"accuracyPercent": 50, "wpm": 70},
        "spelling": {"accuracyPercent": 45, "phonemeGraphemeMismatch": 70},
        "visual": {"hits": 8, "falsePositives": 1, "timeElapsed": 70},
        "cognitive": {"maxLengthReached": 5, "accuracy": 80}
    }
"""

from typing import Annotated, Any
from uuid import uuid4

from fastapi import APIRouter, Depends

from levixia_screening.core.screening import (
    ScreeningService,
    ScreeningSubmission,
    get_screening_service,
)
from levixia_screening.utils.logging import bind_context, clear_context, get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post("")
async def run_screening(
    submission: ScreeningSubmission,
    service: Annotated[ScreeningService, Depends(get_screening_service)],
) -> dict[str, Any]:
    """Run a full screening.

    Request body fields may be camelCase or snake_case. Missing tests
    are scored from all-default records.

    Args:
        submission: The four raw test payloads.
        service: Screening service.

    Returns:
        Structured result, report, report source and generation time.
    """
    bind_context(screening_id=str(uuid4()))
    try:
        outcome = await service.run_screening(submission)
        logger.info(
            "Screening request served",
            primary_type=outcome.result.inference.primary_type,
            report_source=outcome.report_source,
        )
        return outcome.to_dict()
    finally:
        clear_context()


@router.post("/evaluate")
async def evaluate_screening(
    submission: ScreeningSubmission,
    service: Annotated[ScreeningService, Depends(get_screening_service)],
) -> dict[str, Any]:
    """Classify a submission without producing a report.

    Args:
        submission: The four raw test payloads.
        service: Screening service.

    Returns:
        Structured screening result.
    """
    result = service.evaluate(submission)
    logger.debug(
        "Screening evaluated without report",
        primary_type=result.inference.primary_type,
    )
    return result.to_dict()
