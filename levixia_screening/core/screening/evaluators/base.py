# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Base evaluator classes for per-test scoring.

Evaluators are pure transforms from one raw test result to a record of
evaluated metrics. They never raise: missing values were already
defaulted when the submission was parsed.

IMPORTANT: Evaluators produce screening INDICATORS only, not diagnoses.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from levixia_screening.core.screening.models import ScreeningTest

RawT = TypeVar("RawT", bound=BaseModel)
MetricsT = TypeVar("MetricsT", bound="EvaluatedMetrics")


@dataclass(frozen=True)
class EvaluatedMetrics:
    """Base record of scores derived from one test.

    Subclasses add their own score fields. Tuples are exposed as lists
    by to_dict() so the record serializes to plain JSON.
    """

    def to_dict(self) -> dict[str, Any]:
        """Convert metrics to dictionary."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[f.name] = list(value) if isinstance(value, tuple) else value
        return result


class BaseEvaluator(ABC, Generic[RawT, MetricsT]):
    """Abstract base class for per-test evaluators.

    Each evaluator turns one raw test record into evaluated metrics
    using fixed formulas. Threshold indicators are computed from
    unrounded scores; the scores exposed on the metrics record are
    rounded half-up to integers.
    """

    def __init__(self) -> None:
        """Initialize the evaluator."""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    @abstractmethod
    def test_type(self) -> ScreeningTest:
        """Return the test this evaluator scores."""
        pass

    @abstractmethod
    def evaluate(self, raw: RawT) -> MetricsT:
        """Score one raw test result.

        Args:
            raw: Parsed raw test record.

        Returns:
            Evaluated metrics for this test.
        """
        pass

    def _calculate_variance(self, values: list[float]) -> float:
        """Calculate population variance of a list of values.

        Args:
            values: List of numeric values.

        Returns:
            Variance of the values, 0.0 for fewer than two values.
        """
        if len(values) < 2:
            return 0.0

        mean = sum(values) / len(values)
        squared_diffs = [(x - mean) ** 2 for x in values]
        return sum(squared_diffs) / len(values)
