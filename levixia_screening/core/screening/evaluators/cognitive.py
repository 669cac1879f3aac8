# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Cognitive test evaluator.

Scores the memory-sequence test for working memory, attention span,
task-switching consistency, cognitive load and executive function, and
classifies recall errors against the shown sequence.
"""

from dataclasses import dataclass, field
from typing import Sequence

from levixia_screening.core.screening.evaluators.base import BaseEvaluator, EvaluatedMetrics
from levixia_screening.core.screening.inputs import CognitiveResult
from levixia_screening.core.screening.models import ScreeningTest, round_half_up


@dataclass(frozen=True)
class CognitiveMetrics(EvaluatedMetrics):
    """Evaluated cognitive metrics.

    Attributes:
        working_memory_score: Longest recalled sequence relative to 8 items.
        attention_score: Recall accuracy.
        task_switching_score: Response-time consistency.
        cognitive_load_score: Sensitivity to load; higher is worse.
        focus_stability_score: Accuracy across rounds.
        executive_function_score: Weighted composite.
        error_patterns: Recall error labels.
        indicators: Threshold indicators that fired.
    """

    working_memory_score: int = 0
    attention_score: int = 0
    task_switching_score: int = 75
    cognitive_load_score: int = 0
    focus_stability_score: int = 0
    executive_function_score: int = 0
    error_patterns: tuple[str, ...] = field(default_factory=tuple)
    indicators: tuple[str, ...] = field(default_factory=tuple)


class CognitiveEvaluator(BaseEvaluator[CognitiveResult, CognitiveMetrics]):
    """Evaluator for the memory-sequence test."""

    # Sequence length treated as full working-memory capacity
    MAX_SEQUENCE_LENGTH = 8

    # Used when no response times were captured
    DEFAULT_TASK_SWITCHING_SCORE = 75.0

    WEIGHTS = {
        "working_memory": 0.4,
        "attention": 0.3,
        "task_switching": 0.3,
    }

    @property
    def test_type(self) -> ScreeningTest:
        """Return cognitive test type."""
        return ScreeningTest.COGNITIVE

    def evaluate(self, raw: CognitiveResult) -> CognitiveMetrics:
        """Score a memory-sequence test result.

        Args:
            raw: Parsed cognitive test record.

        Returns:
            CognitiveMetrics with rounded scores, error patterns and indicators.
        """
        accuracy = raw.accuracy
        working_memory = min(100.0, raw.max_length_reached / self.MAX_SEQUENCE_LENGTH * 100)
        attention = accuracy

        task_switching = self.DEFAULT_TASK_SWITCHING_SCORE
        if raw.response_times:
            variance = self._calculate_variance(list(raw.response_times))
            task_switching = max(0.0, 100 - variance * 10)

        cognitive_load = 100 - (accuracy * 0.6 + (100 - working_memory) * 0.4)
        focus_stability = accuracy
        executive_function = (
            working_memory * self.WEIGHTS["working_memory"]
            + attention * self.WEIGHTS["attention"]
            + task_switching * self.WEIGHTS["task_switching"]
        )

        error_patterns = self.analyze_error_patterns(raw.sequence, raw.user_sequence)
        indicators = self.generate_indicators(
            working_memory=working_memory,
            attention=attention,
            task_switching=task_switching,
            cognitive_load=cognitive_load,
        )

        self.logger.debug(
            "Cognitive test evaluated",
            extra={
                "working_memory": working_memory,
                "task_switching": task_switching,
                "indicator_count": len(indicators),
            },
        )

        return CognitiveMetrics(
            working_memory_score=round_half_up(working_memory),
            attention_score=round_half_up(attention),
            task_switching_score=round_half_up(task_switching),
            cognitive_load_score=round_half_up(cognitive_load),
            focus_stability_score=round_half_up(focus_stability),
            executive_function_score=round_half_up(executive_function),
            error_patterns=tuple(error_patterns),
            indicators=tuple(indicators),
        )

    def analyze_error_patterns(
        self,
        sequence: Sequence[int | str],
        user_sequence: Sequence[int | str],
    ) -> list[str]:
        """Classify recall errors against the shown sequence.

        Args:
            sequence: Items shown to the user.
            user_sequence: Items the user recalled.

        Returns:
            Error pattern labels, empty when either sequence is empty.
        """
        if not sequence or not user_sequence:
            return []

        patterns: list[str] = []

        # Adjacent swap
        for i in range(min(len(sequence), len(user_sequence)) - 1):
            if sequence[i] == user_sequence[i + 1] and sequence[i + 1] == user_sequence[i]:
                patterns.append("Transposition")
                break

        start_correct = all(
            self._item_at(user_sequence, i) == item for i, item in enumerate(sequence[:2])
        )
        end_offset = len(user_sequence) - 2
        end_correct = all(
            self._item_at(user_sequence, end_offset + i) == item
            for i, item in enumerate(sequence[-2:])
        )
        if start_correct and not end_correct:
            patterns.append("Primacy Effect")
        if not start_correct and end_correct:
            patterns.append("Recency Effect")

        if len(user_sequence) < len(sequence):
            patterns.append("Omissions")
        if len(user_sequence) > len(sequence):
            patterns.append("Intrusions")

        return patterns

    def generate_indicators(
        self,
        working_memory: float,
        attention: float,
        task_switching: float,
        cognitive_load: float,
    ) -> list[str]:
        """Generate threshold indicators from unrounded scores."""
        indicators: list[str] = []

        if working_memory < 60:
            indicators.append("Working memory difficulty")
        if attention < 60:
            indicators.append("Attention span challenges")
        if task_switching < 60:
            indicators.append("Task-switching inefficiency")
        if cognitive_load > 70:
            indicators.append("High cognitive load sensitivity")

        return indicators

    @staticmethod
    def _item_at(items: Sequence[int | str], index: int) -> int | str | None:
        # Out-of-range positions never match
        if 0 <= index < len(items):
            return items[index]
        return None
