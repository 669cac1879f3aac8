# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Accessibility feature recommender.

Chooses accessibility categories from the evaluated metrics and
flattens them into the feature list handed to the reading assistant.
Category names and items come from the screening configuration.
"""

from dataclasses import dataclass, field
from typing import Any

from levixia_screening.core.screening.config import AccessibilityCategory, ScreeningConfig
from levixia_screening.core.screening.normalizer import ScreeningMetrics

PERSONALIZED_SETTINGS = "Personalized assistant settings"


@dataclass(frozen=True)
class AccessibilityPlan:
    """Recommended accessibility support.

    Attributes:
        categories: Triggered categories, or the general category.
        features: De-duplicated feature names, ending with personalized settings.
    """

    categories: tuple[AccessibilityCategory, ...] = field(default_factory=tuple)
    features: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "categories": [c.to_dict() for c in self.categories],
            "features": list(self.features),
        }


def recommend_accessibility(
    metrics: ScreeningMetrics,
    config: ScreeningConfig,
) -> AccessibilityPlan:
    """Recommend accessibility features for one submission.

    Args:
        metrics: Evaluated metrics for all four tests.
        config: Screening configuration holding the feature catalog.

    Returns:
        AccessibilityPlan with categories and a flat feature list.
    """
    keys: list[str] = []
    if metrics.reading.phonological_issues:
        keys.append("reading_aids")
    if metrics.visual.visual_stress_score < 60:
        keys.append("visual_adjustments")
    if metrics.cognitive.cognitive_load_score > 70:
        keys.append("cognitive_support")
    if not keys:
        keys.append("general")

    categories = tuple(config.get_category(key) for key in keys)

    features = [item for category in categories for item in category.items]
    features = [item for item in dict.fromkeys(features) if item != PERSONALIZED_SETTINGS]
    features.append(PERSONALIZED_SETTINGS)

    return AccessibilityPlan(categories=categories, features=tuple(features))
