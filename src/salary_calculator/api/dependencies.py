"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from salary_calculator.calculators import SalaryCalculator
from salary_calculator.calendar import HolidayCalendar, get_holiday_calendar


def get_calendar() -> HolidayCalendar:
    """Get the shared holiday calendar."""
    return get_holiday_calendar()


def get_calculator(
    calendar: Annotated[HolidayCalendar, Depends(get_calendar)],
) -> SalaryCalculator:
    """Get a calculator bound to the shared calendar."""
    return SalaryCalculator(calendar)


# Type aliases for cleaner dependency injection
Calendar = Annotated[HolidayCalendar, Depends(get_calendar)]
Calculator = Annotated[SalaryCalculator, Depends(get_calculator)]
