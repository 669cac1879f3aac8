# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Metric normalizer.

Maps the four evaluated metric records onto a common set of 0-100
sub-scores per test. Difficulty indices are inverted so that higher is
always better, and every value is clamped.
"""

from dataclasses import dataclass

from levixia_screening.core.screening.evaluators import (
    CognitiveMetrics,
    ReadingMetrics,
    SpellingMetrics,
    VisualMetrics,
)
from levixia_screening.core.screening.models import clamp_score

NormalizedScores = dict[str, dict[str, float]]


@dataclass(frozen=True)
class ScreeningMetrics:
    """Evaluated metrics for all four tests of one submission."""

    cognitive: CognitiveMetrics
    visual: VisualMetrics
    reading: ReadingMetrics
    spelling: SpellingMetrics


def normalize_scores(metrics: ScreeningMetrics) -> NormalizedScores:
    """Normalize evaluated metrics to 0-100 sub-scores.

    Args:
        metrics: Evaluated metrics for all four tests.

    Returns:
        Mapping of test name to sub-score name to a value in [0, 100].
    """
    cognitive = metrics.cognitive
    visual = metrics.visual
    reading = metrics.reading
    spelling = metrics.spelling

    scores: NormalizedScores = {
        "cognitive": {
            "overall": cognitive.executive_function_score,
            "working_memory": cognitive.working_memory_score,
            "attention": cognitive.attention_score,
            "task_switching": cognitive.task_switching_score,
        },
        "visual": {
            "overall": visual.pattern_recognition_score,
            "stress": visual.visual_stress_score,
            "tracking": 100 - visual.tracking_difficulty_index,
            "discrimination": visual.discrimination_score,
        },
        "reading": {
            "overall": reading.accuracy,
            "fluency": reading.fluency_score,
            "decoding": reading.decoding_score,
        },
        "spelling": {
            "overall": spelling.accuracy,
            "orthographic": 100 - spelling.orthographic_weakness,
            "phoneme_grapheme": 100 - spelling.phoneme_grapheme_mismatch,
        },
    }

    return {
        test: {name: clamp_score(value) for name, value in sub_scores.items()}
        for test, sub_scores in scores.items()
    }
