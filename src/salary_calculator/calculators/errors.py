"""Calculation errors."""

from __future__ import annotations


class SalaryCalculatorError(Exception):
    """Base class for salary calculation errors."""


class ValidationError(SalaryCalculatorError):
    """Raised when a pay request fails validation.

    Raised before any day is classified, so a failed request never yields a
    partial breakdown.
    """

    def __init__(self, reason: str, field: str | None = None):
        self.reason = reason
        self.field = field
        super().__init__(reason)
