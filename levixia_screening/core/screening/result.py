# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Structured screening result containers."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from levixia_screening.core.screening.accessibility import AccessibilityPlan
from levixia_screening.core.screening.correlation import CorrelationMatrix
from levixia_screening.core.screening.inference import ConditionInference
from levixia_screening.core.screening.inputs import ScreeningSubmission
from levixia_screening.core.screening.models import Dimension, ScreeningTest
from levixia_screening.core.screening.normalizer import NormalizedScores, ScreeningMetrics
from levixia_screening.core.screening.severity import DimensionSeverity
from levixia_screening.core.screening.support_profile import SupportProfile
from levixia_screening.utils.datetime import format_iso


@dataclass(frozen=True)
class ScreeningResult:
    """Deterministic output of one engine run.

    Contains no timestamps, so identical submissions produce identical
    results.
    """

    submission: ScreeningSubmission
    metrics: ScreeningMetrics
    normalized: NormalizedScores
    correlations: CorrelationMatrix
    severity_by_dimension: dict[Dimension, DimensionSeverity]
    inference: ConditionInference
    accessibility: AccessibilityPlan
    support_profile: SupportProfile

    def to_dict(self) -> dict[str, Any]:
        """Convert result to a JSON-ready dictionary."""
        result: dict[str, Any] = {}
        for test in ScreeningTest:
            raw = getattr(self.submission, test.value)
            metrics = getattr(self.metrics, test.value)
            result[test.value] = {
                "raw": raw.model_dump(mode="json"),
                "metrics": metrics.to_dict(),
                "normalized": dict(self.normalized[test.value]),
            }

        result["correlations"] = self.correlations.to_dict()
        result["severity_by_dimension"] = {
            dimension.value: severity.to_dict()
            for dimension, severity in self.severity_by_dimension.items()
        }
        result["inference"] = self.inference.to_dict()
        result["accessibility"] = self.accessibility.to_dict()
        result["support_profile"] = self.support_profile.to_dict()
        return result


@dataclass(frozen=True)
class ScreeningOutcome:
    """Structured result plus the report shown to the user.

    Attributes:
        result: Deterministic engine output.
        report: Narrative or templated report.
        report_source: 'narrative' or 'fallback'.
        generated_at: When the report was produced.
    """

    result: ScreeningResult
    report: dict[str, Any]
    report_source: str
    generated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Convert outcome to a JSON-ready dictionary."""
        return {
            **self.result.to_dict(),
            "report": self.report,
            "report_source": self.report_source,
            "generated_at": format_iso(self.generated_at),
        }
