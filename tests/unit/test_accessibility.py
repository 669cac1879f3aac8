# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the accessibility feature recommender."""

import pytest

from levixia_screening.core.screening.accessibility import (
    PERSONALIZED_SETTINGS,
    recommend_accessibility,
)
from levixia_screening.core.screening.config import get_screening_config


@pytest.mark.unit
class TestRecommendAccessibility:
    """Tests for recommend_accessibility."""

    def test_general_when_nothing_triggers(self, metrics_factory) -> None:
        """Test the general category is used for strong profiles."""
        plan = recommend_accessibility(metrics_factory(), get_screening_config())

        assert [c.category for c in plan.categories] == ["General"]
        assert plan.features == (PERSONALIZED_SETTINGS,)

    def test_reading_aids_on_phonological_issues(self, metrics_factory) -> None:
        """Test phonological issues trigger reading aids."""
        plan = recommend_accessibility(
            metrics_factory(reading={"phonological_issues": ("ship->sip",)}),
            get_screening_config(),
        )

        assert [c.category for c in plan.categories] == ["Reading Aids"]
        assert plan.features == (
            "Bionic Reading",
            "Text-to-speech",
            "Phonetic support",
            PERSONALIZED_SETTINGS,
        )

    def test_all_triggered_categories_in_order(self, metrics_factory) -> None:
        """Test reading, visual and cognitive categories combine in order."""
        plan = recommend_accessibility(
            metrics_factory(
                reading={"phonological_issues": ("ship->sip",)},
                visual={"visual_stress_score": 40},
                cognitive={"cognitive_load_score": 80},
            ),
            get_screening_config(),
        )

        assert [c.category for c in plan.categories] == [
            "Reading Aids",
            "Visual Adjustments",
            "Cognitive Support",
        ]
        assert "Focus line highlighting" in plan.features
        assert plan.features[-1] == PERSONALIZED_SETTINGS
        assert len(plan.features) == len(set(plan.features))

    def test_thresholds_are_exclusive(self, metrics_factory) -> None:
        """Test stress of exactly 60 and load of exactly 70 do not trigger."""
        plan = recommend_accessibility(
            metrics_factory(
                visual={"visual_stress_score": 60},
                cognitive={"cognitive_load_score": 70},
            ),
            get_screening_config(),
        )

        assert [c.category for c in plan.categories] == ["General"]

    def test_to_dict(self, metrics_factory) -> None:
        """Test the plan serializes categories and features."""
        plan = recommend_accessibility(
            metrics_factory(visual={"visual_stress_score": 10}), get_screening_config()
        )

        data = plan.to_dict()

        assert data["categories"][0]["category"] == "Visual Adjustments"
        assert data["categories"][0]["items"][0] == "Dyslexia-friendly font"
        assert data["features"][-1] == PERSONALIZED_SETTINGS
