# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Holistic screening engine for dyslexia-related learning differences.

Architecture:
    1. Evaluators: per-test scoring (cognitive, visual, reading, spelling)
    2. Normalizer: common 0-100 sub-scores per test
    3. Severity classifier: one rating per screening dimension
    4. Correlator: co-occurring weak signals across tests
    5. Inference engine: ordered rule table producing the condition profile
    6. ScreeningService: orchestrator that also attaches a report

Quick Start:
    from levixia_screening.core.screening import get_screening_service

    service = get_screening_service()
    result = service.evaluate({
        "reading": {"accuracyPercent": 50, "phonologicalIssues": ["ship->sip"]},
        "spelling": {"accuracyPercent": 45, "phonemeGraphemeMismatch": 70},
    })
    print(result.inference.primary_type)

IMPORTANT: This system identifies INDICATORS only, not diagnoses.
"""

from levixia_screening.core.screening.accessibility import AccessibilityPlan, recommend_accessibility
from levixia_screening.core.screening.correlation import CorrelationMatrix, cross_correlate
from levixia_screening.core.screening.exceptions import ScreeningError, ScreeningValidationError
from levixia_screening.core.screening.inference import (
    SUBTYPE_RULES,
    ConditionInference,
    InferenceRule,
    infer_condition_type,
)
from levixia_screening.core.screening.inputs import ScreeningSubmission, parse_submission
from levixia_screening.core.screening.models import Dimension, ScreeningTest, Severity
from levixia_screening.core.screening.normalizer import ScreeningMetrics, normalize_scores
from levixia_screening.core.screening.result import ScreeningOutcome, ScreeningResult
from levixia_screening.core.screening.service import ScreeningService, get_screening_service
from levixia_screening.core.screening.severity import (
    DimensionSeverity,
    compute_severity_by_dimension,
)

__all__ = [
    # Service
    "ScreeningService",
    "get_screening_service",
    "ScreeningResult",
    "ScreeningOutcome",
    # Inputs
    "ScreeningSubmission",
    "parse_submission",
    # Pipeline
    "ScreeningMetrics",
    "normalize_scores",
    "compute_severity_by_dimension",
    "cross_correlate",
    "infer_condition_type",
    "recommend_accessibility",
    # Types
    "AccessibilityPlan",
    "ConditionInference",
    "CorrelationMatrix",
    "Dimension",
    "DimensionSeverity",
    "InferenceRule",
    "ScreeningTest",
    "Severity",
    "SUBTYPE_RULES",
    # Errors
    "ScreeningError",
    "ScreeningValidationError",
]
