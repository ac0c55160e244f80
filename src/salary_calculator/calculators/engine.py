"""Salary calculation engine - day classification and accumulation."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date, timedelta
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_UP, Decimal, localcontext

from salary_calculator.calendar import HolidayCalendar, get_holiday_calendar
from salary_calculator.calculators.errors import ValidationError
from salary_calculator.calculators.types import DayCategory, PayBreakdown, PayRequest

logger = logging.getLogger(__name__)

OUTPUT_PRECISION = Decimal("0.01")
MAX_HOURS_PER_DAY = Decimal("24")

# date.weekday(): Monday == 0 ... Saturday == 5, Sunday == 6
WEEKEND_DAYS = frozenset({5, 6})


@contextmanager
def exact_context() -> Iterator[None]:
    """Decimal context wide enough that products and cents rounding are exact."""
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        yield


def round_to_cents(amount: Decimal) -> Decimal:
    """Round amount to 2 decimal places, half away from zero."""
    with exact_context():
        return amount.quantize(OUTPUT_PRECISION, rounding=ROUND_HALF_UP)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar date from start to end inclusive."""
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def is_weekend_day(day: date) -> bool:
    return day.weekday() in WEEKEND_DAYS


def classify_day(day: date, calendar: HolidayCalendar) -> DayCategory:
    """Classify a date. Holiday wins over weekend, weekend over weekday."""
    if calendar.is_holiday(day):
        return DayCategory.HOLIDAY
    if is_weekend_day(day):
        return DayCategory.WEEKEND
    return DayCategory.WEEKDAY


def validate_request(request: PayRequest) -> None:
    """Check the request before any classification.

    Raises:
        ValidationError: on a reversed range, a non-positive rate, hours per
            day outside (0, 24], or a non-finite (NaN, Infinity) amount.
    """
    if request.start_date > request.end_date:
        raise ValidationError("Start date must be before end date", field="start_date")

    if not request.hourly_rate.is_finite():
        raise ValidationError("Hourly rate must be a finite number", field="hourly_rate")
    if request.hourly_rate <= 0:
        raise ValidationError("Hourly rate must be greater than 0", field="hourly_rate")

    hours = request.hours_per_day
    if not hours.is_finite() or hours <= 0 or hours > MAX_HOURS_PER_DAY:
        raise ValidationError(
            "Hours per day must be between 0 and 24", field="hours_per_day"
        )

    if not request.weekend_premium_multiplier.is_finite():
        raise ValidationError(
            "Weekend premium multiplier must be a finite number",
            field="weekend_premium_multiplier",
        )


class SalaryCalculator:
    """Computes earned wages over an inclusive date range.

    Pipeline (single chronological pass):
    1) Validate the request
    2) Classify each day: holiday > weekend > weekday
    3) Count each category; holidays are recorded even when excluded
    4) Price each category:
       - weekdays at the base rate
       - weekends at rate * premium, only when weekends were worked
       - holidays at the base rate, only when holidays are not excluded
    5) Round monetary outputs to cents

    The calculator keeps no state between calls; one instance can serve
    concurrent requests.
    """

    def __init__(self, calendar: HolidayCalendar | None = None):
        self.calendar = calendar if calendar is not None else get_holiday_calendar()

    def calculate(self, request: PayRequest) -> PayBreakdown:
        """Calculate the pay breakdown for a request.

        Raises:
            ValidationError: If the request is invalid
        """
        validate_request(request)

        if not self.calendar.covers(request.start_date, request.end_date):
            logger.warning(
                "Range %s..%s extends beyond holiday coverage %s; "
                "uncovered years have no holidays",
                request.start_date,
                request.end_date,
                list(self.calendar.covered_years),
            )

        weekday_count = 0
        weekend_count = 0
        holiday_count = 0
        holiday_dates: list[date] = []

        for day in iter_days(request.start_date, request.end_date):
            category = classify_day(day, self.calendar)
            if category is DayCategory.HOLIDAY:
                holiday_count += 1
                holiday_dates.append(day)
            elif category is DayCategory.WEEKEND:
                weekend_count += 1
            else:
                weekday_count += 1

        # Exact arithmetic: rounding happens once, on the monetary outputs
        with exact_context():
            hours_per_day = request.hours_per_day
            rate = request.hourly_rate

            weekday_hours = weekday_count * hours_per_day
            weekday_salary = weekday_hours * rate

            weekend_hours = weekend_count * hours_per_day if request.worked_weekends else Decimal("0")
            effective_weekend_rate = rate * request.weekend_premium_multiplier
            weekend_salary = weekend_hours * effective_weekend_rate

            # Base rate only, even when the holiday falls on a weekend
            holiday_hours = Decimal("0") if request.exclude_holidays else holiday_count * hours_per_day
            holiday_salary = holiday_hours * rate

            total_hours = weekday_hours + weekend_hours + holiday_hours
            total_days = (
                weekday_count
                + (weekend_count if request.worked_weekends else 0)
                + (0 if request.exclude_holidays else holiday_count)
            )
            total_salary = weekday_salary + weekend_salary + holiday_salary

        logger.debug(
            "Calculated %s..%s: weekdays=%d weekends=%d holidays=%d total=%s",
            request.start_date,
            request.end_date,
            weekday_count,
            weekend_count,
            holiday_count,
            total_salary,
        )

        return PayBreakdown(
            weekday_count=weekday_count,
            weekend_count=weekend_count,
            holiday_count=holiday_count,
            holiday_dates=tuple(holiday_dates),
            weekday_salary=round_to_cents(weekday_salary),
            weekend_salary=round_to_cents(weekend_salary),
            holiday_salary=round_to_cents(holiday_salary),
            total_salary=round_to_cents(total_salary),
            total_hours=total_hours,
            total_days=total_days,
            effective_weekend_rate=round_to_cents(effective_weekend_rate),
        )


def calculate(
    request: PayRequest, calendar: HolidayCalendar | None = None
) -> PayBreakdown:
    """Calculate a pay breakdown with the given (or default) calendar."""
    return SalaryCalculator(calendar).calculate(request)
