# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Support profile for the reading and writing assistants.

Derives detailed, deterministic error metrics from the raw reading and
spelling records: spelling error list, letter reversals, phonetic
errors, reading hesitations, word spacing issues, a writing coherence
score, and which assistant (reading, writing or both) to enable first.
"""

import re
from dataclasses import asdict, dataclass, field
from typing import Any

from levixia_screening.core.screening.evaluators import VisualMetrics
from levixia_screening.core.screening.inputs import ReadingResult, SpellingAttempt, SpellingResult
from levixia_screening.core.screening.models import clamp_score, round_half_up

# Letter pairs commonly swapped by mirror reversal
REVERSAL_PAIRS = [
    ("b", "d"),
    ("p", "q"),
]

SPACING_KEYWORDS = ("spacing", "crowding", "close", "tight", "overlap")

PHONETIC_ERROR_TYPES = ("Phonetic", "Phoneme-Grapheme")

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class SpellingError:
    """A misspelled dictation word."""

    word: str
    attempt: str
    error_type: str | None = None
    pattern: str | None = None


@dataclass(frozen=True)
class LetterReversal:
    """A mirror-letter swap between what was expected and what was produced."""

    pattern: str
    word: str
    expected: str
    source: str
    position: int | None = None


@dataclass(frozen=True)
class ReadingHesitation:
    """A substituted or repeated word in the reading transcript."""

    position: int
    word: str
    kind: str
    expected: str | None = None


@dataclass(frozen=True)
class PhoneticError:
    """A sound-letter mapping error from reading or spelling."""

    source: str
    detail: str
    attempt: str | None = None
    error_type: str = "phonological"


@dataclass(frozen=True)
class SupportProfile:
    """Detailed error metrics and assistant recommendation.

    Attributes:
        spelling_errors: Misspelled words.
        error_percentage: Share of classified attempts that were errors.
        letter_reversals: Mirror-letter swaps.
        phonetic_errors: Sound-letter mapping errors.
        reading_hesitations: Substitutions and repetitions while reading.
        word_spacing_issues: Whether spacing or crowding trouble was seen.
        reading_speed_wpm: Words per minute.
        writing_coherence_score: 0-100 writing coherence.
        recommended_assistant: 'reading', 'writing' or 'both'.
    """

    spelling_errors: tuple[SpellingError, ...] = field(default_factory=tuple)
    error_percentage: int = 0
    letter_reversals: tuple[LetterReversal, ...] = field(default_factory=tuple)
    phonetic_errors: tuple[PhoneticError, ...] = field(default_factory=tuple)
    reading_hesitations: tuple[ReadingHesitation, ...] = field(default_factory=tuple)
    word_spacing_issues: bool = False
    reading_speed_wpm: float = 0.0
    writing_coherence_score: int = 0
    recommended_assistant: str = "reading"

    def to_dict(self) -> dict[str, Any]:
        """Convert profile to dictionary."""
        return {
            "spelling_errors": len(self.spelling_errors),
            "spelling_errors_list": [e.word for e in self.spelling_errors],
            "error_percentage": self.error_percentage,
            "letter_reversal": bool(self.letter_reversals),
            "letter_reversal_patterns": [asdict(r) for r in self.letter_reversals],
            "phonetic_errors": len(self.phonetic_errors),
            "phonetic_errors_list": [asdict(e) for e in self.phonetic_errors],
            "reading_gaps_detected": bool(self.reading_hesitations),
            "reading_hesitation_count": len(self.reading_hesitations),
            "reading_hesitation_details": [asdict(h) for h in self.reading_hesitations],
            "word_spacing_issues": self.word_spacing_issues,
            "reading_speed_wpm": self.reading_speed_wpm,
            "writing_coherence_score": self.writing_coherence_score,
            "recommended_assistant": self.recommended_assistant,
        }


def _words(text: str | None) -> list[str]:
    if not text:
        return []
    return [w for w in _WHITESPACE.split(text.lower()) if w]


def _is_swap(produced: str, expected: str, pair: tuple[str, str]) -> bool:
    # Letters are compared position by position
    return any(
        got != want and {got, want} == set(pair) for got, want in zip(produced, expected)
    )


def extract_spelling_errors(spelling: SpellingResult) -> list[SpellingError]:
    """List classified attempts that were not fully correct."""
    return [
        SpellingError(
            word=attempt.word,
            attempt=attempt.attempt,
            error_type=attempt.error_type,
            pattern=attempt.pattern,
        )
        for attempt in spelling.error_classifications
        if attempt.is_error
    ]


def detect_letter_reversals(
    reading: ReadingResult,
    spelling: SpellingResult,
) -> list[LetterReversal]:
    """Find b/d and p/q swaps in the reading transcript and spelling attempts.

    Args:
        reading: Raw reading record, with optional transcript and passage.
        spelling: Raw spelling record.

    Returns:
        Reversals found, reading first, then spelling.
    """
    reversals: list[LetterReversal] = []

    transcript = _words(reading.raw_transcript)
    original = _words(reading.original_text)
    for position, (word, expected) in enumerate(zip(transcript, original)):
        if word == expected:
            continue
        for pair in REVERSAL_PAIRS:
            if _is_swap(word, expected, pair):
                reversals.append(
                    LetterReversal(
                        pattern="/".join(pair),
                        word=word,
                        expected=expected,
                        source="reading",
                        position=position,
                    )
                )

    for attempt in spelling.error_classifications:
        reversals.extend(_spelling_reversals(attempt))

    return reversals


def _spelling_reversals(attempt: SpellingAttempt) -> list[LetterReversal]:
    if not attempt.attempt or not attempt.word:
        return []

    produced = attempt.attempt.lower()
    expected = attempt.word.lower()
    return [
        LetterReversal(
            pattern="/".join(pair),
            word=produced,
            expected=expected,
            source="spelling",
        )
        for pair in REVERSAL_PAIRS
        if _is_swap(produced, expected, pair)
    ]


def detect_reading_hesitations(reading: ReadingResult) -> list[ReadingHesitation]:
    """Find substituted and repeated words in the reading transcript.

    Needs both a transcript and the original passage; returns an empty
    list otherwise.
    """
    transcript = _words(reading.raw_transcript)
    original = _words(reading.original_text)
    if not transcript or not original:
        return []

    hesitations = [
        ReadingHesitation(position=idx, word=word, kind="word_substitution", expected=expected)
        for idx, (word, expected) in enumerate(zip(transcript, original))
        if word != expected
    ]
    hesitations.extend(
        ReadingHesitation(position=idx, word=transcript[idx], kind="repeated_word")
        for idx in range(1, len(transcript))
        if transcript[idx] == transcript[idx - 1]
    )
    return hesitations


def extract_phonetic_errors(
    reading: ReadingResult,
    spelling: SpellingResult,
) -> list[PhoneticError]:
    """Collect phonological issues from reading and phonetic spelling errors."""
    errors = [
        PhoneticError(source="reading", detail=issue)
        for issue in reading.phonological_issues
    ]
    errors.extend(
        PhoneticError(
            source="spelling",
            detail=attempt.word,
            attempt=attempt.attempt,
            error_type=attempt.error_type or "",
        )
        for attempt in spelling.error_classifications
        if attempt.error_type in PHONETIC_ERROR_TYPES
    )
    return errors


def has_word_spacing_issues(reading: ReadingResult, visual: VisualMetrics) -> bool:
    """Check for spacing trouble from the visual test or reading analysis."""
    if "Visual crowding" in visual.indicators:
        return True
    return any(
        keyword in issue.lower()
        for issue in reading.visual_issues
        for keyword in SPACING_KEYWORDS
    )


def calculate_writing_coherence(spelling: SpellingResult) -> int:
    """Score writing coherence 0-100 from spelling accuracy and weaknesses.

    Accuracy contributes up to 40 points; orthographic weakness and
    phoneme/grapheme mismatch each subtract 0.3 per point.
    """
    score = 100 * (spelling.accuracy_percent / 100) * 0.4
    score -= spelling.orthographic_weakness * 0.3
    score -= spelling.phoneme_grapheme_mismatch * 0.3
    return int(clamp_score(round_half_up(score)))


def determine_assistant(
    reading_accuracy: float,
    reading_speed: float,
    hesitation_count: int,
    word_spacing_issues: bool,
    spelling_error_count: int,
    error_percentage: int,
    writing_coherence: int,
    reversal_count: int,
) -> str:
    """Pick the assistant to enable first.

    Reading and writing each collect points from their own signals;
    reversals count toward both.

    Returns:
        'both' when both reach 3 points, 'writing' when writing leads,
        otherwise 'reading'.
    """
    reading_points = 0
    writing_points = 0

    if reading_accuracy < 80:
        reading_points += 2
    if reading_speed < 100:
        reading_points += 1
    if hesitation_count > 3:
        reading_points += 2
    if word_spacing_issues:
        reading_points += 1
    if reversal_count > 2:
        reading_points += 1

    if spelling_error_count > 5:
        writing_points += 2
    if error_percentage > 30:
        writing_points += 2
    if writing_coherence < 60:
        writing_points += 2
    if reversal_count > 2:
        writing_points += 1

    if reading_points >= 3 and writing_points >= 3:
        return "both"
    if writing_points > reading_points:
        return "writing"
    return "reading"


def build_support_profile(
    reading: ReadingResult,
    spelling: SpellingResult,
    visual: VisualMetrics,
) -> SupportProfile:
    """Build the support profile for one submission.

    Args:
        reading: Raw reading record.
        spelling: Raw spelling record.
        visual: Evaluated visual metrics.

    Returns:
        SupportProfile with error details and the recommended assistant.
    """
    spelling_errors = extract_spelling_errors(spelling)
    total_attempts = len(spelling.error_classifications)
    error_percentage = (
        round_half_up(len(spelling_errors) / total_attempts * 100) if total_attempts else 0
    )
    reversals = detect_letter_reversals(reading, spelling)
    hesitations = detect_reading_hesitations(reading)
    phonetic_errors = extract_phonetic_errors(reading, spelling)
    spacing = has_word_spacing_issues(reading, visual)
    coherence = calculate_writing_coherence(spelling)

    assistant = determine_assistant(
        reading_accuracy=reading.accuracy_percent,
        reading_speed=reading.wpm,
        hesitation_count=len(hesitations),
        word_spacing_issues=spacing,
        spelling_error_count=len(spelling_errors),
        error_percentage=error_percentage,
        writing_coherence=coherence,
        reversal_count=len(reversals),
    )

    return SupportProfile(
        spelling_errors=tuple(spelling_errors),
        error_percentage=error_percentage,
        letter_reversals=tuple(reversals),
        phonetic_errors=tuple(phonetic_errors),
        reading_hesitations=tuple(hesitations),
        word_spacing_issues=spacing,
        reading_speed_wpm=reading.wpm,
        writing_coherence_score=coherence,
        recommended_assistant=assistant,
    )
