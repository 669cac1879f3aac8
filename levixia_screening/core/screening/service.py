# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Screening service orchestrating the classification pipeline.

Runs the per-test evaluators, normalizer, dimension severity
classifier, cross-correlator and condition inference over one
submission, then attaches a report.

The pipeline is synchronous and pure. The only awaited step is the
optional narrative report, bounded by a timeout and replaced by the
templated report on any failure.

IMPORTANT: This service identifies INDICATORS only, not diagnoses.
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from levixia_screening.core.config.settings import Settings, get_settings
from levixia_screening.core.intelligence.llm import LLMError
from levixia_screening.core.screening.accessibility import recommend_accessibility
from levixia_screening.core.screening.config import ScreeningConfig, get_screening_config
from levixia_screening.core.screening.correlation import cross_correlate
from levixia_screening.core.screening.evaluators import (
    CognitiveEvaluator,
    ReadingEvaluator,
    SpellingEvaluator,
    VisualEvaluator,
)
from levixia_screening.core.screening.inference import infer_condition_type
from levixia_screening.core.screening.inputs import ScreeningSubmission, parse_submission
from levixia_screening.core.screening.narrative import (
    NarrativeReportError,
    NarrativeReportGenerator,
)
from levixia_screening.core.screening.normalizer import ScreeningMetrics, normalize_scores
from levixia_screening.core.screening.report import build_fallback_report
from levixia_screening.core.screening.result import ScreeningOutcome, ScreeningResult
from levixia_screening.core.screening.severity import compute_severity_by_dimension
from levixia_screening.core.screening.support_profile import build_support_profile
from levixia_screening.utils.datetime import milliseconds_since, utc_now

logger = logging.getLogger(__name__)

REPORT_SOURCE_NARRATIVE = "narrative"
REPORT_SOURCE_FALLBACK = "fallback"


class ScreeningService:
    """Service for running screening assessments.

    Holds no per-run state, so one instance can serve concurrent
    requests.

    Usage:
        service = ScreeningService()

        # Structured result only
        result = service.evaluate({"reading": {"accuracyPercent": 85}})

        # Structured result plus report
        outcome = await service.run_screening(submission)
    """

    def __init__(
        self,
        config: ScreeningConfig | None = None,
        settings: Settings | None = None,
        narrative_generator: NarrativeReportGenerator | None = None,
    ) -> None:
        """Initialize the service with evaluators and configuration.

        Args:
            config: Screening configuration. Loaded from YAML if None.
            settings: Application settings. Uses get_settings() if None.
            narrative_generator: Narrative report generator. Created from
                settings if None.
        """
        self._cognitive = CognitiveEvaluator()
        self._visual = VisualEvaluator()
        self._reading = ReadingEvaluator()
        self._spelling = SpellingEvaluator()

        self._config = config or get_screening_config()
        self._settings = settings or get_settings()
        self._narrative = narrative_generator or NarrativeReportGenerator(
            report_settings=self._settings.report,
        )

    @property
    def narrative_enabled(self) -> bool:
        """Check if narrative reports are requested."""
        return self._settings.report.narrative_enabled

    def evaluate(self, submission: ScreeningSubmission | Mapping[str, Any] | None) -> ScreeningResult:
        """Run the classification pipeline on one submission.

        Args:
            submission: Parsed submission, or a raw mapping to parse.

        Returns:
            Deterministic ScreeningResult.

        Raises:
            ScreeningValidationError: If a raw mapping has an invalid shape.
        """
        if not isinstance(submission, ScreeningSubmission):
            submission = parse_submission(submission)

        metrics = ScreeningMetrics(
            cognitive=self._cognitive.evaluate(submission.cognitive),
            visual=self._visual.evaluate(submission.visual),
            reading=self._reading.evaluate(submission.reading),
            spelling=self._spelling.evaluate(submission.spelling),
        )

        normalized = normalize_scores(metrics)
        severity_by_dimension = compute_severity_by_dimension(metrics)
        correlations = cross_correlate(metrics)
        inference = infer_condition_type(metrics, correlations, severity_by_dimension)

        return ScreeningResult(
            submission=submission,
            metrics=metrics,
            normalized=normalized,
            correlations=correlations,
            severity_by_dimension=severity_by_dimension,
            inference=inference,
            accessibility=recommend_accessibility(metrics, self._config),
            support_profile=build_support_profile(
                submission.reading, submission.spelling, metrics.visual
            ),
        )

    async def run_screening(
        self,
        submission: ScreeningSubmission | Mapping[str, Any] | None,
    ) -> ScreeningOutcome:
        """Run a full screening: classification plus report.

        Args:
            submission: Parsed submission, or a raw mapping to parse.

        Returns:
            ScreeningOutcome with the structured result and a report.

        Raises:
            ScreeningValidationError: If a raw mapping has an invalid shape.
        """
        started_at = utc_now()
        result = self.evaluate(submission)

        logger.info(
            "Screening evaluated",
            extra={
                "primary_type": result.inference.primary_type,
                "severity": result.inference.severity.value,
                "confidence": result.inference.confidence,
            },
        )

        lang = self._settings.report.language
        fallback = build_fallback_report(result, self._config, lang)
        report = fallback
        source = REPORT_SOURCE_FALLBACK

        if self.narrative_enabled:
            narrative = await self._request_narrative(result, fallback)
            if narrative is not None:
                report = narrative
                source = REPORT_SOURCE_NARRATIVE

        logger.info(
            "Screening completed",
            extra={
                "report_source": source,
                "duration_ms": milliseconds_since(started_at),
            },
        )

        return ScreeningOutcome(
            result=result,
            report=report,
            report_source=source,
            generated_at=utc_now(),
        )

    async def _request_narrative(
        self,
        result: ScreeningResult,
        fallback: dict[str, Any],
    ) -> dict[str, Any] | None:
        """Request a narrative report, returning None on any failure."""
        timeout = self._settings.report.timeout_seconds
        try:
            return await asyncio.wait_for(
                self._narrative.generate(result.to_dict(), fallback),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Narrative report timed out, using templated report",
                extra={"timeout_seconds": timeout},
            )
        except (LLMError, NarrativeReportError) as e:
            logger.warning(
                "Narrative report failed, using templated report: %s",
                str(e),
            )
        return None


# Singleton instance
_service_instance: ScreeningService | None = None


def get_screening_service() -> ScreeningService:
    """Get the screening service singleton.

    Returns:
        ScreeningService instance.
    """
    global _service_instance
    if _service_instance is None:
        _service_instance = ScreeningService()
    return _service_instance
