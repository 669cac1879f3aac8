# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Condition inference engine.

Applies an ordered rule table over evaluated metrics, correlations and
dimension severities to produce dyslexia subtype labels, attention and
executive-function indicators, a primary label, an overall severity and
a confidence score.

Rules are evaluated independently and in order. The primary label is
the first rule that fires, unless a later rule overrides it (Double
Deficit). Confidence starts at 0.5 and is only ever raised.

IMPORTANT: Labels are screening INDICATORS only, not diagnoses.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from levixia_screening.core.screening.correlation import CorrelationMatrix
from levixia_screening.core.screening.models import Dimension, Severity, round_half_up
from levixia_screening.core.screening.normalizer import ScreeningMetrics
from levixia_screening.core.screening.severity import DimensionSeverity

logger = logging.getLogger(__name__)

PHONOLOGICAL = "Phonological Dyslexia"
SURFACE = "Surface Dyslexia"
RAPID_NAMING = "Rapid Naming Dyslexia"
DOUBLE_DEFICIT = "Double Deficit Dyslexia"
VISUAL_ORTHOGRAPHIC = "Visual (Orthographic) Dyslexia"
AUDITORY = "Auditory Dyslexia"
DEVELOPMENTAL = "Developmental Dyslexia"
NONE_IDENTIFIED = "None identified"
ADHD_PRIMARY = "ADHD-related indicators"
ADHD_LEARNING_PATTERN = "ADHD-related learning pattern"

BASE_CONFIDENCE = 0.5
MAX_CONFIDENCE = 0.95
NO_FINDINGS_CONFIDENCE = 0.6
ADHD_PATTERN_CONFIDENCE = 0.68

# Weights of the overall average used for severity escalation
AVERAGE_WEIGHTS = {
    "reading_accuracy": 0.25,
    "spelling_accuracy": 0.25,
    "pattern_recognition": 0.2,
    "executive_function": 0.15,
    "reading_fluency": 0.15,
}


@dataclass(frozen=True)
class InferenceSignals:
    """Boolean and numeric signals the rule table reads.

    Built once per run from the evaluated metrics and correlations.
    """

    reading_low: bool
    spelling_low: bool
    phonological: bool
    visual_issue: bool
    orthographic: bool
    slow_naming: bool
    attention_low: bool
    task_switching_low: bool
    executive_low: bool
    memory_low: bool
    has_error_patterns: bool
    reading_fluency: float
    tracking_difficulty: float
    crowding: float
    reading_spelling_correlation: float

    @classmethod
    def from_metrics(
        cls,
        metrics: ScreeningMetrics,
        correlations: CorrelationMatrix,
    ) -> "InferenceSignals":
        """Derive rule signals from metrics and correlations."""
        cognitive = metrics.cognitive
        visual = metrics.visual
        reading = metrics.reading
        spelling = metrics.spelling

        return cls(
            reading_low=reading.accuracy < 70,
            spelling_low=spelling.accuracy < 70,
            phonological=(
                len(reading.phonological_issues) > 0 or spelling.phoneme_grapheme_mismatch > 50
            ),
            visual_issue=visual.visual_stress_score < 60 or visual.discrimination_score < 60,
            orthographic=spelling.orthographic_weakness > 50,
            slow_naming=reading.wpm < 80 and reading.accuracy >= 70,
            attention_low=cognitive.attention_score < 60,
            task_switching_low=cognitive.task_switching_score < 60,
            executive_low=cognitive.executive_function_score < 60,
            memory_low=cognitive.working_memory_score < 60,
            has_error_patterns=len(cognitive.error_patterns) > 0,
            reading_fluency=reading.fluency_score,
            tracking_difficulty=visual.tracking_difficulty_index,
            crowding=visual.crowding_score,
            reading_spelling_correlation=correlations.reading_spelling,
        )


@dataclass(frozen=True)
class InferenceRule:
    """One row of the subtype rule table.

    Attributes:
        label: Subtype label appended when the rule fires.
        predicate: Test over the signals and the labels fired so far.
        confidence: Confidence floor raised to when the rule fires.
        overrides_primary: Whether the label replaces an earlier primary.
    """

    label: str
    predicate: Callable[[InferenceSignals, Sequence[str]], bool]
    confidence: float
    overrides_primary: bool = False


SUBTYPE_RULES: tuple[InferenceRule, ...] = (
    InferenceRule(
        label=PHONOLOGICAL,
        predicate=lambda s, _: (
            s.reading_low
            and s.spelling_low
            and s.phonological
            and s.reading_spelling_correlation > 0.6
        ),
        confidence=0.78,
    ),
    InferenceRule(
        label=SURFACE,
        predicate=lambda s, _: (
            s.visual_issue and s.reading_low and s.orthographic and not s.phonological
        ),
        confidence=0.72,
    ),
    InferenceRule(
        label=RAPID_NAMING,
        predicate=lambda s, _: s.slow_naming and s.reading_fluency < 70,
        confidence=0.65,
    ),
    InferenceRule(
        label=DOUBLE_DEFICIT,
        predicate=lambda _, fired: PHONOLOGICAL in fired and RAPID_NAMING in fired,
        confidence=0.82,
        overrides_primary=True,
    ),
    InferenceRule(
        label=VISUAL_ORTHOGRAPHIC,
        predicate=lambda s, _: (
            s.visual_issue and s.tracking_difficulty > 50 and s.crowding < 60
        ),
        confidence=0.70,
    ),
    InferenceRule(
        label=AUDITORY,
        predicate=lambda s, _: s.phonological and s.memory_low and not s.visual_issue,
        confidence=0.62,
    ),
)


@dataclass(frozen=True)
class ConditionInference:
    """Terminal inference output.

    Attributes:
        dyslexia_types: Fired subtype labels, or ['None identified'].
        adhd_indicators: Attention and executive-function indicators.
        primary_type: Best-fit label for display.
        severity: Overall severity.
        confidence: Heuristic certainty in [0, 0.95].
        average_score: Weighted average used for severity escalation.
    """

    dyslexia_types: tuple[str, ...]
    adhd_indicators: tuple[str, ...]
    primary_type: str
    severity: Severity
    confidence: float
    average_score: float = 0.0
    fired_rules: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_findings(self) -> bool:
        """Check if any subtype or indicator fired."""
        return bool(self.fired_rules) or bool(self.adhd_indicators)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "dyslexia_types": list(self.dyslexia_types),
            "adhd_indicators": list(self.adhd_indicators),
            "primary_type": self.primary_type,
            "severity": self.severity.value,
            "confidence": self.confidence,
            "average_score": self.average_score,
        }


def weighted_average_score(metrics: ScreeningMetrics) -> float:
    """Weighted average across tests used for overall severity."""
    return (
        metrics.reading.accuracy * AVERAGE_WEIGHTS["reading_accuracy"]
        + metrics.spelling.accuracy * AVERAGE_WEIGHTS["spelling_accuracy"]
        + metrics.visual.pattern_recognition_score * AVERAGE_WEIGHTS["pattern_recognition"]
        + metrics.cognitive.executive_function_score * AVERAGE_WEIGHTS["executive_function"]
        + metrics.reading.fluency_score * AVERAGE_WEIGHTS["reading_fluency"]
    )


def collect_adhd_indicators(signals: InferenceSignals) -> tuple[list[str], bool]:
    """Accumulate attention and executive-function indicators.

    Returns:
        Tuple of (de-duplicated indicators, whether the learning-pattern
        conjunction fired).
    """
    indicators: list[str] = []
    if signals.attention_low:
        indicators.append("Inattention")
    if signals.task_switching_low:
        indicators.append("Task-switching difficulty")
    if signals.executive_low:
        indicators.append("Executive function difficulty")
    if signals.has_error_patterns:
        indicators.append("Working memory / sequencing")

    learning_pattern = (
        signals.attention_low
        and signals.task_switching_low
        and (signals.reading_low or signals.spelling_low)
    )
    if learning_pattern:
        indicators.append(ADHD_LEARNING_PATTERN)

    return list(dict.fromkeys(indicators)), learning_pattern


def resolve_overall_severity(
    severity_by_dimension: dict[Dimension, DimensionSeverity],
    average_score: float,
    has_findings: bool,
) -> Severity:
    """Combine the worst dimension with the weighted average.

    The worst dimension is the floor. A low average forces Severe; a
    middling average lifts a no-difficulty floor to Moderate but leaves
    any other floor alone. A high average with no findings at all
    reports no difficulty regardless of the floor.
    """
    severity = Severity.worst([d.severity for d in severity_by_dimension.values()])

    if average_score < 50:
        severity = Severity.SEVERE
    elif average_score < 70:
        if severity == Severity.NO_SIGNIFICANT_DIFFICULTY:
            severity = Severity.MODERATE
    elif average_score >= 85 and not has_findings:
        severity = Severity.NO_SIGNIFICANT_DIFFICULTY

    return severity


def infer_condition_type(
    metrics: ScreeningMetrics,
    correlations: CorrelationMatrix,
    severity_by_dimension: dict[Dimension, DimensionSeverity],
    rules: Sequence[InferenceRule] = SUBTYPE_RULES,
) -> ConditionInference:
    """Infer the condition profile for one submission.

    Args:
        metrics: Evaluated metrics for all four tests.
        correlations: Cross-test correlation strengths.
        severity_by_dimension: Severity per dimension.
        rules: Ordered subtype rule table.

    Returns:
        ConditionInference for the submission.
    """
    signals = InferenceSignals.from_metrics(metrics, correlations)

    fired: list[str] = []
    primary_type: str | None = None
    confidence = BASE_CONFIDENCE

    for rule in rules:
        if not rule.predicate(signals, fired):
            continue
        fired.append(rule.label)
        if primary_type is None or rule.overrides_primary:
            primary_type = rule.label
        confidence = max(confidence, rule.confidence)

    dyslexia_types = [*fired, DEVELOPMENTAL] if fired else [NONE_IDENTIFIED]

    adhd_indicators, learning_pattern = collect_adhd_indicators(signals)
    if learning_pattern:
        confidence = max(confidence, ADHD_PATTERN_CONFIDENCE)

    has_findings = bool(fired) or bool(adhd_indicators)
    average_score = weighted_average_score(metrics)
    severity = resolve_overall_severity(severity_by_dimension, average_score, has_findings)

    if not has_findings and average_score >= 70:
        confidence = NO_FINDINGS_CONFIDENCE

    if primary_type is None:
        primary_type = ADHD_PRIMARY if adhd_indicators else NONE_IDENTIFIED

    confidence = round_half_up(min(MAX_CONFIDENCE, confidence) * 100) / 100

    logger.debug(
        "Condition inferred",
        extra={
            "fired_rules": fired,
            "adhd_indicator_count": len(adhd_indicators),
            "average_score": average_score,
            "severity": severity.value,
        },
    )

    return ConditionInference(
        dyslexia_types=tuple(dyslexia_types),
        adhd_indicators=tuple(adhd_indicators),
        primary_type=primary_type,
        severity=severity,
        confidence=confidence,
        average_score=round(average_score, 2),
        fired_rules=tuple(fired),
    )
