# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the cross-dimension correlator."""

import pytest

from levixia_screening.core.screening.correlation import cross_correlate


@pytest.mark.unit
class TestCrossCorrelate:
    """Tests for cross_correlate."""

    def test_strong_profile_has_no_correlations(self, metrics_factory) -> None:
        """Test that no pair triggers for strong performance."""
        matrix = cross_correlate(metrics_factory())

        assert all(value == 0.0 for value in matrix.to_dict().values())

    def test_reading_and_spelling_both_low(self, metrics_factory) -> None:
        """Test weak reading and spelling correlate at 0.9."""
        matrix = cross_correlate(
            metrics_factory(reading={"accuracy": 50}, spelling={"accuracy": 45})
        )

        assert matrix.reading_spelling == 0.9

    def test_phonological_flags_on_both_sides(self, metrics_factory) -> None:
        """Test phonological issues plus high mismatch correlate at 0.85."""
        matrix = cross_correlate(
            metrics_factory(
                reading={"accuracy": 80, "phonological_issues": ("ship->sip",)},
                spelling={"accuracy": 80, "phoneme_grapheme_mismatch": 60},
            )
        )

        assert matrix.reading_spelling == 0.85

    def test_low_accuracy_takes_precedence_over_phonological(self, metrics_factory) -> None:
        """Test the 0.9 rule wins when both reading-spelling rules hold."""
        matrix = cross_correlate(
            metrics_factory(
                reading={"accuracy": 50, "phonological_issues": ("ship->sip",)},
                spelling={"accuracy": 45, "phoneme_grapheme_mismatch": 70},
            )
        )

        assert matrix.reading_spelling == 0.9

    def test_cognitive_pairs(self, metrics_factory) -> None:
        """Test cognitive pairs with visual, reading and spelling."""
        matrix = cross_correlate(
            metrics_factory(
                cognitive={
                    "executive_function_score": 40,
                    "working_memory_score": 50,
                    "attention_score": 40,
                },
                visual={"pattern_recognition_score": 55},
                reading={"accuracy": 60},
                spelling={"accuracy": 60},
            )
        )

        assert matrix.cognitive_visual == 0.7
        assert matrix.cognitive_reading == 0.8
        assert matrix.cognitive_spelling == 0.6

    def test_visual_pairs(self, metrics_factory) -> None:
        """Test visual stress with fluency and discrimination with spelling."""
        matrix = cross_correlate(
            metrics_factory(
                visual={"visual_stress_score": 40, "discrimination_score": 50},
                reading={"fluency_score": 60},
                spelling={"accuracy": 65},
            )
        )

        assert matrix.visual_reading == 0.75
        assert matrix.visual_spelling == 0.7

    def test_values_within_unit_interval(self, metrics_factory) -> None:
        """Test every strength is in [0, 1]."""
        matrix = cross_correlate(
            metrics_factory(
                cognitive={"executive_function_score": 0, "working_memory_score": 0, "attention_score": 0},
                visual={"visual_stress_score": 0, "pattern_recognition_score": 0, "discrimination_score": 0},
                reading={"accuracy": 0, "fluency_score": 0},
                spelling={"accuracy": 0},
            )
        )

        assert all(0.0 <= value <= 1.0 for value in matrix.to_dict().values())
