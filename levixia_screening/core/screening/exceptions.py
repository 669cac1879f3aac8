# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Exceptions raised at the screening boundary.

The classification pipeline never raises. These exceptions are only
raised while parsing a submission into typed test results.
"""

from typing import Any


class ScreeningError(Exception):
    """Base exception for screening errors.

    Attributes:
        message: Error description.
    """

    def __init__(self, message: str) -> None:
        """Initialize ScreeningError.

        Args:
            message: Error description.
        """
        self.message = message
        super().__init__(self.message)


class ScreeningValidationError(ScreeningError):
    """Raised when a submission has an invalid shape.

    Missing fields are not an error (they default to 0 or empty);
    this covers values of the wrong type, such as text where a
    number is expected.

    Attributes:
        message: Error description.
        errors: Validation errors as reported by pydantic.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        """Initialize ScreeningValidationError.

        Args:
            message: Error description.
            errors: Validation error details.
        """
        self.errors = errors or []
        super().__init__(message)
