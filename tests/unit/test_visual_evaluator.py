# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the visual processing evaluator."""

import pytest

from levixia_screening.core.screening.evaluators import VisualEvaluator
from levixia_screening.core.screening.inputs import VisualResult


@pytest.fixture
def evaluator() -> VisualEvaluator:
    """Create a visual evaluator."""
    return VisualEvaluator()


@pytest.mark.unit
class TestVisualScores:
    """Tests for visual score formulas."""

    def test_many_false_positives_and_slow_search(self, evaluator: VisualEvaluator) -> None:
        """Test a crowded, slow search."""
        raw = VisualResult(hits=3, false_positives=9, correct_count=3, time_elapsed=120)

        metrics = evaluator.evaluate(raw)

        assert metrics.crowding_score < 40
        assert metrics.visual_stress_score == 0
        assert "Visual crowding" in metrics.indicators
        assert "Visual stress" in metrics.indicators

    def test_slow_search_adds_stress_penalty(self, evaluator: VisualEvaluator) -> None:
        """Test that searches over 90 seconds lose 20 stress points."""
        fast = evaluator.evaluate(
            VisualResult(hits=3, false_positives=1, correct_count=3, time_elapsed=60, accuracy=80)
        )
        slow = evaluator.evaluate(
            VisualResult(hits=3, false_positives=1, correct_count=3, time_elapsed=120, accuracy=80)
        )

        # false positive rate 33.3% doubles to a 66.7 point penalty
        assert fast.visual_stress_score == 33
        assert slow.visual_stress_score == 13

    def test_clean_search(self, evaluator: VisualEvaluator) -> None:
        """Test a fast accurate search raises no indicators."""
        raw = VisualResult(hits=10, false_positives=0, correct_count=10, time_elapsed=60, accuracy=95)

        metrics = evaluator.evaluate(raw)

        assert metrics.visual_stress_score == 100
        # 100 - 95*0.7 = 33.5, rounded half up
        assert metrics.tracking_difficulty_index == 34
        assert metrics.pattern_recognition_score == 95
        assert metrics.crowding_score == 100
        assert metrics.discrimination_score == 95
        assert metrics.indicators == ()

    def test_low_efficiency_adds_tracking_penalty(self, evaluator: VisualEvaluator) -> None:
        """Test that fewer than one hit per minute adds 30 tracking points."""
        raw = VisualResult(hits=1, correct_count=3, time_elapsed=120, accuracy=20)

        metrics = evaluator.evaluate(raw)

        # 100 - (20*0.7 + 30)
        assert metrics.tracking_difficulty_index == 56
        assert "Line tracking difficulty" in metrics.indicators

    def test_empty_record(self, evaluator: VisualEvaluator) -> None:
        """Test the all-default record."""
        metrics = evaluator.evaluate(VisualResult())

        assert metrics.visual_stress_score == 100
        assert metrics.tracking_difficulty_index == 70
        assert metrics.crowding_score == 0
        assert metrics.indicators == (
            "Line tracking difficulty",
            "Visual crowding",
            "Symbol discrimination challenges",
        )


@pytest.mark.unit
class TestCrowding:
    """Tests for crowding assessment."""

    def test_no_hits_scores_zero(self, evaluator: VisualEvaluator) -> None:
        """Test that no hits means no crowding resistance."""
        assert evaluator.assess_crowding(0, 5) == 0.0

    def test_error_rate_scaled(self, evaluator: VisualEvaluator) -> None:
        """Test crowding falls 150 points per unit error rate."""
        assert evaluator.assess_crowding(9, 1) == pytest.approx(85.0)
        assert evaluator.assess_crowding(10, 0) == 100.0

    def test_floor_at_zero(self, evaluator: VisualEvaluator) -> None:
        """Test crowding never goes negative."""
        assert evaluator.assess_crowding(3, 9) == 0.0


@pytest.mark.unit
class TestDiscriminationIndicator:
    """Tests for the symbol discrimination indicator."""

    def test_fires_below_60(self, evaluator: VisualEvaluator) -> None:
        """Test that low accuracy flags symbol discrimination."""
        metrics = evaluator.evaluate(
            VisualResult(hits=5, correct_count=5, time_elapsed=30, accuracy=55)
        )

        assert metrics.discrimination_score == 55
        assert "Symbol discrimination challenges" in metrics.indicators

    def test_silent_at_60(self, evaluator: VisualEvaluator) -> None:
        """Test the threshold is exclusive."""
        metrics = evaluator.evaluate(
            VisualResult(hits=5, correct_count=5, time_elapsed=30, accuracy=60)
        )

        assert "Symbol discrimination challenges" not in metrics.indicators
