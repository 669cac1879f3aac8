# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Templated screening report.

Built purely from the structured result by string interpolation. Used
whenever the narrative report is disabled or fails, and as the source
of the deterministic fields merged into a narrative report.
"""

from typing import Any

from levixia_screening.core.screening.config import ScreeningConfig
from levixia_screening.core.screening.inference import NONE_IDENTIFIED
from levixia_screening.core.screening.models import Severity
from levixia_screening.core.screening.result import ScreeningResult

# Report keys that always come from the structured result
DETERMINISTIC_KEYS = (
    "detected_conditions",
    "primary_type",
    "adhd_indicators",
    "severity_level",
    "confidence_score",
    "per_test_breakdown",
    "severity_by_dimension",
    "recommendations",
    "accessibility_features",
    "disclaimer",
    "recommend_professional_evaluation",
    "writing_coherence_score",
    "recommended_assistant",
)

DEFAULT_STRENGTHS = ["Willingness to engage", "Clear self-awareness"]


def _pct(value: float) -> str:
    return f"{value:g}%"


def identify_strengths(result: ScreeningResult) -> list[str]:
    """List areas scoring 75 or above."""
    metrics = result.metrics
    strengths: list[str] = []

    if metrics.reading.accuracy >= 75:
        strengths.append("Reading fluency")
    if metrics.spelling.accuracy >= 75:
        strengths.append("Spelling accuracy")
    if metrics.visual.pattern_recognition_score >= 75:
        strengths.append("Visual discrimination")
    if metrics.cognitive.executive_function_score >= 75:
        strengths.append("Working memory")

    return strengths or list(DEFAULT_STRENGTHS)


def identify_challenges(result: ScreeningResult) -> list[str]:
    """List areas below their difficulty thresholds."""
    metrics = result.metrics
    challenges: list[str] = []

    if metrics.reading.accuracy < 70:
        challenges.append("Reading fluency")
    if metrics.spelling.accuracy < 70:
        challenges.append("Spelling consistency")
    if metrics.visual.visual_stress_score < 60:
        challenges.append("Visual processing")
    if metrics.cognitive.working_memory_score < 60:
        challenges.append("Working memory")

    return challenges


def per_test_breakdown(result: ScreeningResult) -> dict[str, str]:
    """One summary line per test."""
    metrics = result.metrics
    return {
        "cognitive": (
            f"Working memory: {_pct(metrics.cognitive.working_memory_score)}, "
            f"Attention: {_pct(metrics.cognitive.attention_score)}"
        ),
        "visual": (
            f"Visual processing: {_pct(metrics.visual.pattern_recognition_score)}, "
            f"Stress: {_pct(metrics.visual.visual_stress_score)}"
        ),
        "reading": (
            f"Reading accuracy: {_pct(metrics.reading.accuracy)}, "
            f"Fluency: {_pct(metrics.reading.fluency_score)}"
        ),
        "spelling": f"Spelling accuracy: {_pct(metrics.spelling.accuracy)}",
    }


def build_fallback_report(
    result: ScreeningResult,
    config: ScreeningConfig,
    lang: str = "en",
) -> dict[str, Any]:
    """Build the templated report for a structured result.

    Args:
        result: Structured screening result.
        config: Screening configuration with report text.
        lang: Language code for configured text.

    Returns:
        Report dictionary.
    """
    inference = result.inference
    severity = inference.severity

    return {
        "executive_summary": config.get_executive_summary(severity.value, lang),
        "detected_conditions": [t for t in inference.dyslexia_types if t != NONE_IDENTIFIED],
        "primary_type": inference.primary_type,
        "adhd_indicators": list(inference.adhd_indicators),
        "severity_level": severity.value,
        "confidence_score": inference.confidence,
        "strengths": identify_strengths(result),
        "challenges": identify_challenges(result),
        "per_test_breakdown": per_test_breakdown(result),
        "severity_by_dimension": {
            dimension.value: rating.to_dict()
            for dimension, rating in result.severity_by_dimension.items()
        },
        "personalized_feedback": config.get_personalized_feedback(lang),
        "recommendations": [c.to_dict() for c in result.accessibility.categories],
        "accessibility_features": list(result.accessibility.features),
        "disclaimer": config.get_disclaimer(lang),
        "recommend_professional_evaluation": severity in (Severity.MODERATE, Severity.SEVERE),
        "writing_coherence_score": result.support_profile.writing_coherence_score,
        "recommended_assistant": result.support_profile.recommended_assistant,
    }
