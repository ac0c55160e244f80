"""Salary calculation engine."""

from salary_calculator.calculators.engine import (
    SalaryCalculator,
    calculate,
    classify_day,
    iter_days,
    round_to_cents,
)
from salary_calculator.calculators.errors import SalaryCalculatorError, ValidationError
from salary_calculator.calculators.types import DayCategory, PayBreakdown, PayRequest

__all__ = [
    "DayCategory",
    "PayBreakdown",
    "PayRequest",
    "SalaryCalculator",
    "SalaryCalculatorError",
    "ValidationError",
    "calculate",
    "classify_day",
    "iter_days",
    "round_to_cents",
]
