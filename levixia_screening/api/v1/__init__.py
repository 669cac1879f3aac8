# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API v1 routes package.

Modules:
    screening: Screening evaluation and report endpoints.
"""

from fastapi import APIRouter

from levixia_screening.api.v1 import screening

# Create the main v1 router
router = APIRouter(prefix="/api/v1")

router.include_router(screening.router, prefix="/screening", tags=["Screening"])

__all__ = ["router"]
