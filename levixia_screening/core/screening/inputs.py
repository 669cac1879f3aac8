# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Raw test result models.

Each mini-test hands the engine an already-computed record. Field names
are accepted in camelCase (as produced by the test UI) or snake_case.
Every field carries an explicit default: absent or null values become
0 or an empty list. Zero defaults bias thresholds toward "difficulty",
so callers should submit complete records.

Example:
    >>> submission = parse_submission({"reading": {"accuracyPercent": 85}})
    >>> submission.reading.accuracy_percent
    85.0
"""

from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from levixia_screening.core.screening.exceptions import ScreeningValidationError


class RawTestResult(BaseModel):
    """Base model for a single test's raw output.

    Immutable once parsed. Unknown fields are ignored and null values
    fall back to the field default.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data


class SpellingAttempt(RawTestResult):
    """One classified spelling attempt.

    Attributes:
        word: Target word.
        attempt: What the user wrote (also accepted as 'typed').
        error_type: Classification label, 'Correct' for a correct attempt.
        accuracy: Per-word accuracy 0-100, if reported.
        pattern: Free-form error pattern description.
    """

    word: str = ""
    attempt: str = Field(default="", validation_alias=AliasChoices("attempt", "typed"))
    error_type: str | None = Field(
        default=None, validation_alias=AliasChoices("type", "errorType", "error_type")
    )
    accuracy: float | None = None
    pattern: str | None = None

    @property
    def is_error(self) -> bool:
        """Check if this attempt counts as a spelling error."""
        low_accuracy = self.accuracy is not None and self.accuracy < 100
        return low_accuracy or self.error_type != "Correct"


class ReadingResult(RawTestResult):
    """Reading test output (passage reading, already analyzed)."""

    accuracy_percent: float = 0.0
    wpm: float = 0.0
    error_type: str = "Unknown"
    error_patterns: list[str] = Field(default_factory=list)
    dyslexia_likelihood: str = "Low"
    phonological_issues: list[str] = Field(default_factory=list)
    visual_issues: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    raw_transcript: str | None = None
    original_text: str | None = None


class SpellingResult(RawTestResult):
    """Spelling dictation output (already classified)."""

    accuracy_percent: float = 0.0
    orthographic_weakness: float = 0.0
    phoneme_grapheme_mismatch: float = 0.0
    error_types: list[str] = Field(default_factory=list)
    error_classifications: list[SpellingAttempt] = Field(default_factory=list)
    feedback: str = ""


class VisualResult(RawTestResult):
    """Letter-search test output."""

    hits: int = 0
    false_positives: int = 0
    correct_count: int = 0
    selected_count: int = 0
    time_elapsed: float = 0.0
    accuracy: float = 0.0
    target: str = ""


class CognitiveResult(RawTestResult):
    """Memory-sequence test output."""

    correct: int = 0
    total: int = 0
    time_elapsed: float = 0.0
    accuracy: float = 0.0
    max_length_reached: int = 0
    sequence: list[int | str] = Field(default_factory=list)
    user_sequence: list[int | str] = Field(default_factory=list)
    response_times: list[float] = Field(default_factory=list)


class ScreeningSubmission(RawTestResult):
    """One assessment's four raw test payloads.

    A skipped test is represented by its all-default record.
    """

    reading: ReadingResult = Field(default_factory=ReadingResult)
    spelling: SpellingResult = Field(default_factory=SpellingResult)
    visual: VisualResult = Field(default_factory=VisualResult)
    cognitive: CognitiveResult = Field(default_factory=CognitiveResult)


def parse_submission(data: Mapping[str, Any] | None) -> ScreeningSubmission:
    """Parse a raw mapping into a typed submission.

    Args:
        data: Mapping with optional 'reading', 'spelling', 'visual' and
            'cognitive' entries. None is treated as an empty submission.

    Returns:
        Parsed ScreeningSubmission.

    Raises:
        ScreeningValidationError: If a value has the wrong type.
    """
    try:
        return ScreeningSubmission.model_validate(data or {})
    except ValidationError as e:
        raise ScreeningValidationError(
            f"Invalid screening submission: {e.error_count()} error(s)",
            errors=e.errors(include_url=False),
        ) from e
