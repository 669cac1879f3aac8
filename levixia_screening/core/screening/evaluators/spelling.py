# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Spelling test evaluator.

Spelling attempts are classified upstream; this is a restructuring only.
"""

from dataclasses import dataclass, field
from typing import Any

from levixia_screening.core.screening.evaluators.base import BaseEvaluator, EvaluatedMetrics
from levixia_screening.core.screening.inputs import SpellingResult
from levixia_screening.core.screening.models import ScreeningTest


@dataclass(frozen=True)
class SpellingMetrics(EvaluatedMetrics):
    """Structured spelling metrics."""

    accuracy: float = 0.0
    error_types: tuple[str, ...] = field(default_factory=tuple)
    orthographic_weakness: float = 0.0
    phoneme_grapheme_mismatch: float = 0.0
    error_classifications: tuple[dict[str, Any], ...] = field(default_factory=tuple)
    feedback: str = ""


class SpellingEvaluator(BaseEvaluator[SpellingResult, SpellingMetrics]):
    """Evaluator for the spelling dictation test."""

    @property
    def test_type(self) -> ScreeningTest:
        """Return spelling test type."""
        return ScreeningTest.SPELLING

    def evaluate(self, raw: SpellingResult) -> SpellingMetrics:
        """Restructure a spelling result."""
        return SpellingMetrics(
            accuracy=raw.accuracy_percent,
            error_types=tuple(raw.error_types),
            orthographic_weakness=raw.orthographic_weakness,
            phoneme_grapheme_mismatch=raw.phoneme_grapheme_mismatch,
            error_classifications=tuple(
                attempt.model_dump() for attempt in raw.error_classifications
            ),
            feedback=raw.feedback,
        )
