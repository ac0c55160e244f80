"""Pytest fixtures for salary calculator tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Callable

import pytest

from salary_calculator.calculators import PayRequest, SalaryCalculator
from salary_calculator.calendar import HolidayCalendar


@pytest.fixture
def calendar() -> HolidayCalendar:
    """US federal holidays 2024-2026."""
    return HolidayCalendar.us_federal()


@pytest.fixture
def calculator(calendar: HolidayCalendar) -> SalaryCalculator:
    """Calculator bound to the US federal calendar."""
    return SalaryCalculator(calendar)


@pytest.fixture
def make_request() -> Callable[..., PayRequest]:
    """Factory for pay requests with sensible defaults.

    Defaults to the first week of 2024 at 20/h, 8h/day.
    """

    def _make(**overrides: Any) -> PayRequest:
        fields: dict[str, Any] = {
            "start_date": date(2024, 1, 1),
            "end_date": date(2024, 1, 7),
            "hourly_rate": Decimal("20"),
            "hours_per_day": Decimal("8"),
            "worked_weekends": False,
            "weekend_premium_multiplier": Decimal("1.0"),
            "exclude_holidays": True,
        }
        fields.update(overrides)
        return PayRequest(**fields)

    return _make
