"""Holiday calendar lookup."""

from salary_calculator.calendar.holidays import (
    US_FEDERAL_HOLIDAYS,
    HolidayCalendar,
    get_holiday_calendar,
    parse_date,
)

__all__ = [
    "US_FEDERAL_HOLIDAYS",
    "HolidayCalendar",
    "get_holiday_calendar",
    "parse_date",
]
