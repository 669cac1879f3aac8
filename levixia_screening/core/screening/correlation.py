# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Cross-dimension correlator.

Flags pairs of tests that show weak signals together. Strengths are
fixed evidentiary weights chosen by rule, not statistical coefficients.
They feed the condition inference only and never change severities.
"""

from dataclasses import asdict, dataclass
from typing import Any

from levixia_screening.core.screening.normalizer import ScreeningMetrics


@dataclass(frozen=True)
class CorrelationMatrix:
    """Pairwise correlation strengths in [0, 1], 0 meaning no signal."""

    cognitive_visual: float = 0.0
    cognitive_reading: float = 0.0
    cognitive_spelling: float = 0.0
    visual_reading: float = 0.0
    visual_spelling: float = 0.0
    reading_spelling: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


def cross_correlate(metrics: ScreeningMetrics) -> CorrelationMatrix:
    """Detect co-occurring weak signals across tests.

    Args:
        metrics: Evaluated metrics for all four tests.

    Returns:
        CorrelationMatrix with a fixed strength for every triggered pair.
    """
    cognitive = metrics.cognitive
    visual = metrics.visual
    reading = metrics.reading
    spelling = metrics.spelling

    reading_low = reading.accuracy < 70
    spelling_low = spelling.accuracy < 70

    cognitive_visual = 0.0
    if cognitive.executive_function_score < 60 and visual.pattern_recognition_score < 60:
        cognitive_visual = 0.7

    cognitive_reading = 0.0
    if cognitive.working_memory_score < 60 and reading_low:
        cognitive_reading = 0.8

    cognitive_spelling = 0.0
    if cognitive.attention_score < 60 and spelling_low:
        cognitive_spelling = 0.6

    visual_reading = 0.0
    if visual.visual_stress_score < 60 and reading.fluency_score < 70:
        visual_reading = 0.75

    visual_spelling = 0.0
    if visual.discrimination_score < 60 and spelling_low:
        visual_spelling = 0.7

    # Phonological flags on both sides
    phonological_both = (
        len(reading.phonological_issues) > 0 and spelling.phoneme_grapheme_mismatch > 50
    )
    reading_spelling = 0.0
    if reading_low and spelling_low:
        reading_spelling = 0.9
    elif phonological_both:
        reading_spelling = 0.85

    return CorrelationMatrix(
        cognitive_visual=cognitive_visual,
        cognitive_reading=cognitive_reading,
        cognitive_spelling=cognitive_spelling,
        visual_reading=visual_reading,
        visual_spelling=visual_spelling,
        reading_spelling=reading_spelling,
    )
