# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Narrative screening report generator.

Asks an external text generator for a user-friendly report in JSON.
Classification fields are never taken from the generated text: the
deterministic values from the templated report are merged back over it.
"""

import json
import logging
import re
from typing import Any

from levixia_screening.core.config.settings import ReportSettings
from levixia_screening.core.intelligence.llm import LLMClient
from levixia_screening.core.screening.exceptions import ScreeningError
from levixia_screening.core.screening.report import DETERMINISTIC_KEYS

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You write short, encouraging, non-clinical summaries of learning "
    "screening results. Never present results as a medical diagnosis."
)

INSTRUCTION = (
    "Using the screening data below, return one JSON object with the keys "
    "executive_summary, strengths, challenges and personalized_feedback. "
    "Return JSON only."
)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


class NarrativeReportError(ScreeningError):
    """Raised when generated text cannot be used as a report."""


def parse_report_json(content: str) -> dict[str, Any]:
    """Parse a generated report, tolerating a surrounding code fence.

    Args:
        content: Raw generated text.

    Returns:
        Parsed report object.

    Raises:
        NarrativeReportError: If the text is not a JSON object.
    """
    text = _CODE_FENCE.sub("", content.strip())
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise NarrativeReportError(f"Generated report is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise NarrativeReportError(
            f"Generated report must be a JSON object, got {type(parsed).__name__}"
        )
    return parsed


class NarrativeReportGenerator:
    """Generates narrative reports through the LLM client.

    Usage:
        generator = NarrativeReportGenerator()
        report = await generator.generate(result.to_dict(), fallback_report)
    """

    def __init__(
        self,
        llm_client: LLMClient | None = None,
        report_settings: ReportSettings | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            llm_client: Client to use. Created lazily from settings if None.
            report_settings: Sampling settings. Defaults used if None.
        """
        self._llm_client = llm_client
        self._settings = report_settings or ReportSettings()

    @property
    def llm_client(self) -> LLMClient:
        """Get the LLM client, creating it on first use."""
        if self._llm_client is None:
            self._llm_client = LLMClient()
        return self._llm_client

    async def generate(
        self,
        structured_result: dict[str, Any],
        fallback_report: dict[str, Any],
    ) -> dict[str, Any]:
        """Generate a narrative report.

        Args:
            structured_result: Structured screening result as a dictionary.
            fallback_report: Templated report supplying deterministic fields.

        Returns:
            Narrative report with deterministic fields restored.

        Raises:
            LLMError: If the completion fails.
            NarrativeReportError: If the generated text is unusable.
        """
        prompt = f"{INSTRUCTION}\n\nSCREENING DATA:\n{json.dumps(structured_result, indent=2)}"

        response = await self.llm_client.complete(
            prompt=prompt,
            system_prompt=SYSTEM_PROMPT,
            temperature=self._settings.temperature,
            max_tokens=self._settings.max_tokens,
            json_mode=True,
        )

        narrative = parse_report_json(response.content)

        logger.debug(
            "Narrative report generated",
            extra={"model": response.model, "tokens": response.total_tokens},
        )

        report = {**fallback_report, **narrative}
        report.update({key: fallback_report[key] for key in DETERMINISTIC_KEYS})
        return report
