# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API Layer for the screening engine.

This module provides the FastAPI application and all HTTP endpoints.
"""

from levixia_screening.api.app import create_app, run_server

__all__ = ["create_app", "run_server"]
