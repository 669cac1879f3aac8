# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Reading test evaluator.

The passage-reading test arrives already analyzed. This evaluator
restructures it and derives fluency and decoding scores.
"""

from dataclasses import dataclass, field

from levixia_screening.core.screening.evaluators.base import BaseEvaluator, EvaluatedMetrics
from levixia_screening.core.screening.inputs import ReadingResult
from levixia_screening.core.screening.models import ScreeningTest, round_half_up


@dataclass(frozen=True)
class ReadingMetrics(EvaluatedMetrics):
    """Structured reading metrics."""

    accuracy: float = 0.0
    wpm: float = 0.0
    error_type: str = "Unknown"
    error_patterns: tuple[str, ...] = field(default_factory=tuple)
    dyslexia_likelihood: str = "Low"
    phonological_issues: tuple[str, ...] = field(default_factory=tuple)
    visual_issues: tuple[str, ...] = field(default_factory=tuple)
    strengths: tuple[str, ...] = field(default_factory=tuple)
    fluency_score: int = 0
    decoding_score: int = 0


class ReadingEvaluator(BaseEvaluator[ReadingResult, ReadingMetrics]):
    """Evaluator for the passage-reading test."""

    # Reading speed treated as fully fluent
    FLUENT_WPM = 200

    # Decoding penalty per phonological issue, and its cap
    ISSUE_PENALTY = 5
    MAX_ISSUE_PENALTY = 30

    @property
    def test_type(self) -> ScreeningTest:
        """Return reading test type."""
        return ScreeningTest.READING

    def evaluate(self, raw: ReadingResult) -> ReadingMetrics:
        """Structure a reading result and derive fluency and decoding."""
        return ReadingMetrics(
            accuracy=raw.accuracy_percent,
            wpm=raw.wpm,
            error_type=raw.error_type,
            error_patterns=tuple(raw.error_patterns),
            dyslexia_likelihood=raw.dyslexia_likelihood,
            phonological_issues=tuple(raw.phonological_issues),
            visual_issues=tuple(raw.visual_issues),
            strengths=tuple(raw.strengths),
            fluency_score=self.calculate_fluency_score(raw),
            decoding_score=self.calculate_decoding_score(raw),
        )

    def calculate_fluency_score(self, raw: ReadingResult) -> int:
        """Combine normalized speed (40%) with accuracy (60%)."""
        normalized_wpm = min(100.0, raw.wpm / self.FLUENT_WPM * 100)
        return round_half_up(normalized_wpm * 0.4 + raw.accuracy_percent * 0.6)

    def calculate_decoding_score(self, raw: ReadingResult) -> int:
        """Accuracy less a capped penalty per phonological issue."""
        penalty = min(self.MAX_ISSUE_PENALTY, self.ISSUE_PENALTY * len(raw.phonological_issues))
        return max(0, round_half_up(raw.accuracy_percent - penalty))
