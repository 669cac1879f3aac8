# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Visual processing test evaluator.

Scores the letter-search test for visual stress, line tracking,
visual crowding and symbol discrimination.
"""

from dataclasses import dataclass, field

from levixia_screening.core.screening.evaluators.base import BaseEvaluator, EvaluatedMetrics
from levixia_screening.core.screening.inputs import VisualResult
from levixia_screening.core.screening.models import ScreeningTest, round_half_up


@dataclass(frozen=True)
class VisualMetrics(EvaluatedMetrics):
    """Evaluated visual metrics.

    Attributes:
        visual_stress_score: Penalized by false positives and slow searches.
        tracking_difficulty_index: Line tracking difficulty; higher is worse.
        pattern_recognition_score: Search accuracy.
        crowding_score: Resistance to crowding; 0 when nothing was found.
        discrimination_score: Symbol discrimination accuracy.
        indicators: Threshold indicators that fired.
    """

    visual_stress_score: int = 0
    tracking_difficulty_index: int = 0
    pattern_recognition_score: int = 0
    crowding_score: int = 0
    discrimination_score: int = 0
    indicators: tuple[str, ...] = field(default_factory=tuple)


class VisualEvaluator(BaseEvaluator[VisualResult, VisualMetrics]):
    """Evaluator for the letter-search test."""

    # Searches slower than this many seconds add a stress penalty
    SLOW_SEARCH_SECONDS = 90
    SLOW_SEARCH_PENALTY = 20

    # Fewer than one hit per minute adds a tracking penalty
    LOW_EFFICIENCY_PENALTY = 30

    @property
    def test_type(self) -> ScreeningTest:
        """Return visual test type."""
        return ScreeningTest.VISUAL

    def evaluate(self, raw: VisualResult) -> VisualMetrics:
        """Score a letter-search test result.

        Args:
            raw: Parsed visual test record.

        Returns:
            VisualMetrics with rounded scores and indicators.
        """
        accuracy = raw.accuracy

        false_positive_rate = (
            raw.false_positives / raw.correct_count * 100 if raw.correct_count > 0 else 0.0
        )
        slow_penalty = self.SLOW_SEARCH_PENALTY if raw.time_elapsed > self.SLOW_SEARCH_SECONDS else 0
        visual_stress = max(0.0, 100 - (false_positive_rate * 2 + slow_penalty))

        efficiency = (
            raw.hits / (raw.time_elapsed or 1) * 60 if raw.correct_count > 0 else 0.0
        )
        efficiency_penalty = self.LOW_EFFICIENCY_PENALTY if efficiency < 1 else 0
        tracking_difficulty = max(0.0, 100 - (accuracy * 0.7 + efficiency_penalty))

        pattern_recognition = accuracy
        crowding = self.assess_crowding(raw.hits, raw.false_positives)
        discrimination = accuracy

        indicators = self.generate_indicators(
            visual_stress=visual_stress,
            tracking_difficulty=tracking_difficulty,
            crowding=crowding,
            discrimination=discrimination,
        )

        return VisualMetrics(
            visual_stress_score=round_half_up(visual_stress),
            tracking_difficulty_index=round_half_up(tracking_difficulty),
            pattern_recognition_score=round_half_up(pattern_recognition),
            crowding_score=round_half_up(crowding),
            discrimination_score=round_half_up(discrimination),
            indicators=tuple(indicators),
        )

    def assess_crowding(self, hits: int, false_positives: int) -> float:
        """Score resistance to visual crowding.

        Args:
            hits: Correct selections.
            false_positives: Incorrect selections.

        Returns:
            Crowding score 0-100, 0 when there were no hits.
        """
        if hits == 0:
            return 0.0

        error_rate = false_positives / (hits + false_positives)
        return max(0.0, 100 - error_rate * 150)

    def generate_indicators(
        self,
        visual_stress: float,
        tracking_difficulty: float,
        crowding: float,
        discrimination: float,
    ) -> list[str]:
        """Generate threshold indicators from unrounded scores."""
        indicators: list[str] = []

        if visual_stress < 60:
            indicators.append("Visual stress")
        if tracking_difficulty > 50:
            indicators.append("Line tracking difficulty")
        if crowding < 60:
            indicators.append("Visual crowding")
        if discrimination < 60:
            indicators.append("Symbol discrimination challenges")

        return indicators
