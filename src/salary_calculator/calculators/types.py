"""Type definitions for the salary calculation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from salary_calculator.calendar.holidays import parse_date

NumberLike = Decimal | int | float | str


def to_decimal(value: NumberLike) -> Decimal:
    """Coerce a number to Decimal; floats go through str() to keep 1.5 exact."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("Expected a number, got bool")
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


class DayCategory(str, Enum):
    """Day categories, in classification precedence order."""

    HOLIDAY = "holiday"
    WEEKEND = "weekend"
    WEEKDAY = "weekday"


@dataclass(frozen=True)
class PayRequest:
    """Inputs for one salary computation."""

    start_date: date
    end_date: date
    hourly_rate: Decimal
    hours_per_day: Decimal = Decimal("8")
    worked_weekends: bool = False
    weekend_premium_multiplier: Decimal = Decimal("1.0")
    exclude_holidays: bool = True

    def __post_init__(self) -> None:
        # Frozen, so coerce through object.__setattr__
        for name in ("start_date", "end_date"):
            object.__setattr__(self, name, parse_date(getattr(self, name)))
        for name in ("hourly_rate", "hours_per_day", "weekend_premium_multiplier"):
            object.__setattr__(self, name, to_decimal(getattr(self, name)))

    @property
    def day_span(self) -> int:
        """Number of calendar days in the inclusive range (0 if reversed)."""
        return max((self.end_date - self.start_date).days + 1, 0)


@dataclass(frozen=True)
class PayBreakdown:
    """Result of a salary computation.

    Monetary fields are rounded to cents; hours and counts are exact.
    """

    weekday_count: int
    weekend_count: int
    holiday_count: int
    holiday_dates: tuple[date, ...]
    weekday_salary: Decimal
    weekend_salary: Decimal
    holiday_salary: Decimal
    total_salary: Decimal
    total_hours: Decimal
    total_days: int
    effective_weekend_rate: Decimal

    @property
    def classified_days(self) -> int:
        return self.weekday_count + self.weekend_count + self.holiday_count

    def holiday_date_strings(self) -> list[str]:
        """Holiday dates in YYYY-MM-DD form."""
        return [d.isoformat() for d in self.holiday_dates]

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase, JSON-ready representation."""
        return {
            "totalSalary": float(self.total_salary),
            "totalHours": float(self.total_hours),
            "totalDays": self.total_days,
            "weekdayCount": self.weekday_count,
            "weekendCount": self.weekend_count,
            "holidayCount": self.holiday_count,
            "holidayDates": self.holiday_date_strings(),
            "weekdaySalary": float(self.weekday_salary),
            "weekendSalary": float(self.weekend_salary),
            "holidaySalary": float(self.holiday_salary),
            "effectiveWeekendRate": float(self.effective_weekend_rate),
        }
