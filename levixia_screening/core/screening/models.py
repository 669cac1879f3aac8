# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared enums and scoring helpers for the screening engine."""

import math
from enum import Enum


class ScreeningTest(str, Enum):
    """The four screening mini-tests."""

    COGNITIVE = "cognitive"
    VISUAL = "visual"
    READING = "reading"
    SPELLING = "spelling"


class Dimension(str, Enum):
    """Screening dimensions rated for severity."""

    READING_AND_LANGUAGE = "reading_and_language"
    WRITING_AND_SPELLING = "writing_and_spelling"
    VISUAL_PROCESSING = "visual_processing"
    AUDITORY_PROCESSING = "auditory_processing"
    COGNITIVE_AND_ATTENTION = "cognitive_and_attention"


class Severity(str, Enum):
    """Ordered difficulty levels, mildest first."""

    NO_SIGNIFICANT_DIFFICULTY = "No Significant Difficulty"
    MILD = "Mild"
    MODERATE = "Moderate"
    SEVERE = "Severe"

    @property
    def rank(self) -> int:
        """Ordinal position, 0 for no difficulty up to 3 for severe."""
        return _SEVERITY_ORDER.index(self)

    @classmethod
    def from_score(cls, score: float) -> "Severity":
        """Classify a 0-100 composite score.

        Lower bounds are inclusive: 85, 70 and 50.
        """
        if score >= 85:
            return cls.NO_SIGNIFICANT_DIFFICULTY
        if score >= 70:
            return cls.MILD
        if score >= 50:
            return cls.MODERATE
        return cls.SEVERE

    @classmethod
    def worst(cls, severities: list["Severity"]) -> "Severity":
        """Return the highest-ranked severity, or no difficulty if empty."""
        return max(severities, key=lambda s: s.rank, default=cls.NO_SIGNIFICANT_DIFFICULTY)


_SEVERITY_ORDER = list(Severity)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up.

    Python's round() rounds halves to even; here 84.5 becomes 85.
    """
    return int(math.floor(value + 0.5))


def clamp_score(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    """Clamp a score into [lower, upper]."""
    return max(lower, min(upper, value))
