# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Per-dimension severity classifier.

Each dimension gets a weighted composite score (weights sum to 1.0)
which is rounded, clamped and then classified, so the reported
severity always agrees with the reported score.

The auditory dimension has no direct test. It carries a fixed neutral
placeholder and is flagged as not measured.
"""

from dataclasses import dataclass
from typing import Any

from levixia_screening.core.screening.models import Dimension, Severity, clamp_score, round_half_up
from levixia_screening.core.screening.normalizer import ScreeningMetrics

# Placeholder until an auditory test exists
AUDITORY_PLACEHOLDER_SCORE = 75

DIMENSION_WEIGHTS: dict[Dimension, dict[str, float]] = {
    Dimension.READING_AND_LANGUAGE: {
        "accuracy": 0.5,
        "fluency": 0.3,
        "decoding": 0.2,
    },
    Dimension.WRITING_AND_SPELLING: {
        "accuracy": 0.6,
        "orthographic": 0.2,
        "phoneme_grapheme": 0.2,
    },
    Dimension.VISUAL_PROCESSING: {
        "pattern_recognition": 0.4,
        "visual_stress": 0.3,
        "tracking": 0.3,
    },
    Dimension.COGNITIVE_AND_ATTENTION: {
        "executive_function": 0.4,
        "attention": 0.3,
        "task_switching": 0.3,
    },
}


@dataclass(frozen=True)
class DimensionSeverity:
    """Severity rating for one screening dimension.

    Attributes:
        severity: Classified severity.
        score: Composite score 0-100.
        measured: False when the score is a placeholder.
    """

    severity: Severity
    score: int
    measured: bool = True

    @classmethod
    def from_composite(cls, composite: float, measured: bool = True) -> "DimensionSeverity":
        """Round, clamp and classify a composite score."""
        score = int(clamp_score(round_half_up(composite)))
        return cls(severity=Severity.from_score(score), score=score, measured=measured)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "severity": self.severity.value,
            "score": self.score,
            "measured": self.measured,
        }


def _weighted(components: dict[str, float], weights: dict[str, float]) -> float:
    return sum(components[name] * weight for name, weight in weights.items())


def compute_severity_by_dimension(metrics: ScreeningMetrics) -> dict[Dimension, DimensionSeverity]:
    """Rate all five screening dimensions.

    Args:
        metrics: Evaluated metrics for all four tests.

    Returns:
        Severity per dimension, in Dimension order.
    """
    reading = metrics.reading
    spelling = metrics.spelling
    visual = metrics.visual
    cognitive = metrics.cognitive

    components: dict[Dimension, dict[str, float]] = {
        Dimension.READING_AND_LANGUAGE: {
            "accuracy": reading.accuracy,
            "fluency": reading.fluency_score,
            "decoding": reading.decoding_score,
        },
        Dimension.WRITING_AND_SPELLING: {
            "accuracy": spelling.accuracy,
            "orthographic": 100 - spelling.orthographic_weakness,
            "phoneme_grapheme": 100 - spelling.phoneme_grapheme_mismatch,
        },
        Dimension.VISUAL_PROCESSING: {
            "pattern_recognition": visual.pattern_recognition_score,
            "visual_stress": visual.visual_stress_score,
            "tracking": 100 - visual.tracking_difficulty_index,
        },
        Dimension.COGNITIVE_AND_ATTENTION: {
            "executive_function": cognitive.executive_function_score,
            "attention": cognitive.attention_score,
            "task_switching": cognitive.task_switching_score,
        },
    }

    result: dict[Dimension, DimensionSeverity] = {}
    for dimension in Dimension:
        if dimension == Dimension.AUDITORY_PROCESSING:
            result[dimension] = DimensionSeverity.from_composite(
                AUDITORY_PLACEHOLDER_SCORE, measured=False
            )
        else:
            result[dimension] = DimensionSeverity.from_composite(
                _weighted(components[dimension], DIMENSION_WEIGHTS[dimension])
            )

    return result
