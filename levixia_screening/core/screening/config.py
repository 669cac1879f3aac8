# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Screening configuration management.

Loads report text (disclaimer, feedback, summary template) and the
accessibility feature catalog from YAML. Built-in defaults are used for
anything the YAML file does not provide.

Usage:
    from levixia_screening.core.screening.config import get_screening_config

    config = get_screening_config()
    print(config.get_disclaimer("en"))
    reading_aids = config.get_category("reading_aids")
"""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

from levixia_screening.core.config.yaml_loader import YAMLLoadError, deep_merge, load_yaml

logger = logging.getLogger(__name__)

# Packaged config directory - can be overridden by SCREENING_CONFIG_DIR env var
CONFIG_DIR = Path(
    os.environ.get(
        "SCREENING_CONFIG_DIR",
        Path(__file__).parents[2] / "config" / "screening",
    )
)

DEFAULTS: dict[str, Any] = {
    "disclaimer": {
        "en": (
            "This report is from a screening and personalization tool only. "
            "It is not a medical or clinical diagnosis. For diagnosis or "
            "treatment, please see a qualified professional."
        ),
    },
    "personalized_feedback": {
        "en": (
            "Use the recommended tools to support your learning. For persistent "
            "difficulties, consider a professional evaluation."
        ),
    },
    "executive_summary": {
        "en": (
            "This screening suggests a {severity} profile in some areas. Focus on "
            "your strengths and the recommended tools below. This is not a "
            "clinical diagnosis."
        ),
    },
    "accessibility": {
        "reading_aids": {
            "category": "Reading Aids",
            "items": ["Bionic Reading", "Text-to-speech", "Phonetic support"],
        },
        "visual_adjustments": {
            "category": "Visual Adjustments",
            "items": [
                "Dyslexia-friendly font",
                "Letter spacing",
                "Line spacing",
                "Color contrast",
                "Focus line highlighting",
            ],
        },
        "cognitive_support": {
            "category": "Cognitive Support",
            "items": ["Cognitive load reduction", "Chunked text", "Writing support"],
        },
        "general": {
            "category": "General",
            "items": ["Personalized assistant settings"],
        },
    },
}


@dataclass(frozen=True)
class AccessibilityCategory:
    """A named group of accessibility features.

    Attributes:
        key: Catalog key (reading_aids, visual_adjustments, ...).
        category: Display name.
        items: Feature names.
    """

    key: str
    category: str
    items: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"category": self.category, "items": list(self.items)}


@dataclass
class ScreeningConfig:
    """Complete screening configuration.

    Provides localized report text and the accessibility catalog.
    `source` is the YAML file it was read from, None when only the
    built-in defaults are in use.
    """

    disclaimer: dict[str, str]
    personalized_feedback: dict[str, str]
    executive_summary: dict[str, str]
    accessibility: dict[str, AccessibilityCategory]
    source: Path | None = None

    def get_disclaimer(self, lang: str = "en") -> str:
        """Get localized disclaimer.

        Args:
            lang: Language code.

        Returns:
            Disclaimer text, English if the language is missing.
        """
        return _localized(self.disclaimer, lang)

    def get_personalized_feedback(self, lang: str = "en") -> str:
        """Get localized closing feedback."""
        return _localized(self.personalized_feedback, lang)

    def get_executive_summary(self, severity: str, lang: str = "en") -> str:
        """Render the executive summary template for a severity.

        Args:
            severity: Severity label, lowercased into the sentence.
            lang: Language code.

        Returns:
            Rendered summary.
        """
        template = _localized(self.executive_summary, lang)
        return template.format(severity=severity.lower())

    def get_category(self, key: str) -> AccessibilityCategory:
        """Get an accessibility category by catalog key.

        Raises:
            KeyError: If the key is not in the catalog.
        """
        return self.accessibility[key]


def _localized(texts: dict[str, str], lang: str) -> str:
    return texts.get(lang, texts.get("en", ""))


def _as_language_map(value: Any) -> dict[str, str]:
    if isinstance(value, str):
        return {"en": value}
    if isinstance(value, dict):
        return {str(k): str(v) for k, v in value.items()}
    return {}


def _parse_accessibility(data: dict[str, Any]) -> dict[str, AccessibilityCategory]:
    catalog: dict[str, AccessibilityCategory] = {}
    for key, entry in data.items():
        if not isinstance(entry, dict):
            logger.warning("Ignoring malformed accessibility entry: %s", key)
            continue
        catalog[key] = AccessibilityCategory(
            key=key,
            category=str(entry.get("category", key)),
            items=tuple(str(item) for item in entry.get("items", [])),
        )
    return catalog


@lru_cache(maxsize=1)
def load_screening_config(config_dir: str | None = None) -> ScreeningConfig:
    """Load screening configuration from YAML files.

    Uses LRU cache to avoid reloading on every access.
    Call `reload_screening_config()` to reload.

    Args:
        config_dir: Optional config directory override (as string for caching).

    Returns:
        ScreeningConfig instance.
    """
    dir_path = CONFIG_DIR if config_dir is None else Path(config_dir)

    logger.debug("Loading screening config from: %s", dir_path)

    recommendations_path = dir_path / "recommendations.yaml"
    source: Path | None = recommendations_path
    try:
        recommendations_data = load_yaml(recommendations_path)
    except YAMLLoadError as e:
        logger.warning("Failed to load screening recommendations config: %s", e)
        recommendations_data = {}
        source = None

    merged = deep_merge(DEFAULTS, recommendations_data.get("screening", {}) or {})

    config = ScreeningConfig(
        disclaimer=_as_language_map(merged.get("disclaimer")),
        personalized_feedback=_as_language_map(merged.get("personalized_feedback")),
        executive_summary=_as_language_map(merged.get("executive_summary")),
        accessibility=_parse_accessibility(merged.get("accessibility", {})),
        source=source,
    )

    logger.info(
        "Loaded screening config: %d accessibility categories",
        len(config.accessibility),
    )

    return config


def get_screening_config() -> ScreeningConfig:
    """Get the cached screening configuration.

    Returns:
        ScreeningConfig instance.
    """
    return load_screening_config()


def reload_screening_config() -> ScreeningConfig:
    """Force reload of screening configuration.

    Clears the cache and loads fresh configuration.

    Returns:
        Fresh ScreeningConfig instance.
    """
    load_screening_config.cache_clear()
    return load_screening_config()
