# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Per-test evaluators.

One evaluator per mini-test turns its raw record into evaluated metrics:
- CognitiveEvaluator: working memory, attention, task switching
- VisualEvaluator: visual stress, tracking, crowding, discrimination
- ReadingEvaluator: fluency and decoding
- SpellingEvaluator: restructuring of classified attempts
"""

from levixia_screening.core.screening.evaluators.base import BaseEvaluator, EvaluatedMetrics
from levixia_screening.core.screening.evaluators.cognitive import (
    CognitiveEvaluator,
    CognitiveMetrics,
)
from levixia_screening.core.screening.evaluators.reading import ReadingEvaluator, ReadingMetrics
from levixia_screening.core.screening.evaluators.spelling import (
    SpellingEvaluator,
    SpellingMetrics,
)
from levixia_screening.core.screening.evaluators.visual import VisualEvaluator, VisualMetrics

__all__ = [
    "BaseEvaluator",
    "EvaluatedMetrics",
    "CognitiveEvaluator",
    "CognitiveMetrics",
    "VisualEvaluator",
    "VisualMetrics",
    "ReadingEvaluator",
    "ReadingMetrics",
    "SpellingEvaluator",
    "SpellingMetrics",
]
