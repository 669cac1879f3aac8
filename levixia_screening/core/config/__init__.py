# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for the screening engine.

This package provides centralized configuration management:
- Settings: Pydantic-based settings loaded from environment variables
- YAML loader: Utilities for loading YAML configuration files

Example:
    >>> from levixia_screening.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.report.narrative_enabled)
    False
"""

from levixia_screening.core.config.settings import (
    APISettings,
    LLMSettings,
    ReportSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from levixia_screening.core.config.yaml_loader import (
    YAMLLoadError,
    deep_merge,
    load_yaml,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Subsettings
    "LLMSettings",
    "ReportSettings",
    "APISettings",
    # YAML utilities
    "load_yaml",
    "deep_merge",
    "YAMLLoadError",
]
