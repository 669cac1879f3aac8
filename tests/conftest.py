# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests
- Integration tests
"""

from collections.abc import Callable, Generator
from typing import Any

import pytest

from levixia_screening.core.config import clear_settings_cache
from levixia_screening.core.screening.config import load_screening_config
from levixia_screening.core.screening.evaluators import (
    CognitiveMetrics,
    ReadingMetrics,
    SpellingMetrics,
    VisualMetrics,
)
from levixia_screening.core.screening.normalizer import ScreeningMetrics


# =============================================================================
# Cache Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_caches() -> Generator[None, None, None]:
    """Clear cached settings and screening config around every test."""
    clear_settings_cache()
    load_screening_config.cache_clear()
    yield
    clear_settings_cache()
    load_screening_config.cache_clear()


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# =============================================================================
# Submission Fixtures
# =============================================================================


@pytest.fixture
def typical_submission() -> dict[str, Any]:
    """Provide a complete submission from a typical performer."""
    return {
        "reading": {
            "accuracyPercent": 95,
            "wpm": 180,
            "errorType": "None",
            "dyslexiaLikelihood": "Low",
            "strengths": ["Steady pace"],
        },
        "spelling": {
            "accuracyPercent": 92,
            "orthographicWeakness": 10,
            "phonemeGraphemeMismatch": 10,
            "errorClassifications": [
                {"word": "friend", "attempt": "friend", "type": "Correct", "accuracy": 100},
                {"word": "because", "attempt": "becuase", "type": "Orthographic", "accuracy": 85},
            ],
        },
        "visual": {
            "hits": 10,
            "falsePositives": 0,
            "correctCount": 10,
            "selectedCount": 10,
            "timeElapsed": 60,
            "accuracy": 95,
            "target": "b",
        },
        "cognitive": {
            "correct": 8,
            "total": 8,
            "timeElapsed": 40,
            "accuracy": 95,
            "maxLengthReached": 8,
            "responseTimes": [1.0, 1.1, 0.9, 1.0],
        },
    }


@pytest.fixture
def phonological_submission() -> dict[str, Any]:
    """Provide a submission with weak reading and spelling and phonological flags."""
    return {
        "reading": {
            "accuracyPercent": 50,
            "phonologicalIssues": ["ship->sip"],
        },
        "spelling": {
            "accuracyPercent": 45,
            "phonemeGraphemeMismatch": 70,
        },
    }


# =============================================================================
# Metrics Fixtures
# =============================================================================


@pytest.fixture
def metrics_factory() -> Callable[..., ScreeningMetrics]:
    """Provide a factory for evaluated metrics with strong defaults.

    Keyword arguments are grouped per test, e.g.
    ``metrics_factory(reading={"accuracy": 50})``.
    """

    def _build(
        cognitive: dict[str, Any] | None = None,
        visual: dict[str, Any] | None = None,
        reading: dict[str, Any] | None = None,
        spelling: dict[str, Any] | None = None,
    ) -> ScreeningMetrics:
        return ScreeningMetrics(
            cognitive=CognitiveMetrics(
                **{
                    "working_memory_score": 90,
                    "attention_score": 90,
                    "task_switching_score": 90,
                    "cognitive_load_score": 30,
                    "focus_stability_score": 90,
                    "executive_function_score": 90,
                    **(cognitive or {}),
                }
            ),
            visual=VisualMetrics(
                **{
                    "visual_stress_score": 95,
                    "tracking_difficulty_index": 20,
                    "pattern_recognition_score": 90,
                    "crowding_score": 95,
                    "discrimination_score": 90,
                    **(visual or {}),
                }
            ),
            reading=ReadingMetrics(
                **{
                    "accuracy": 90,
                    "wpm": 160,
                    "fluency_score": 86,
                    "decoding_score": 90,
                    **(reading or {}),
                }
            ),
            spelling=SpellingMetrics(
                **{
                    "accuracy": 90,
                    "orthographic_weakness": 10,
                    "phoneme_grapheme_mismatch": 10,
                    **(spelling or {}),
                }
            ),
        )

    return _build
