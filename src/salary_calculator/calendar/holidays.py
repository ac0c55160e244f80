"""Holiday calendar backed by a fixed table of observed holiday dates.

Each observed holiday is stored as its own calendar date. There is no rule
engine ("third Monday of January"); covering another year means adding that
year's dates to the table.

Dates outside the covered years are simply not holidays. Callers that care
can compare a range against ``covered_years``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date, datetime
from functools import lru_cache

from salary_calculator.config import get_settings

# US federal holidays, one entry per observed occurrence.
US_FEDERAL_HOLIDAYS: tuple[str, ...] = (
    # 2024
    "2024-01-01", "2024-01-15", "2024-02-19", "2024-05-27", "2024-06-19",
    "2024-07-04", "2024-09-02", "2024-10-14", "2024-11-11", "2024-11-28",
    "2024-12-25",
    # 2025
    "2025-01-01", "2025-01-20", "2025-02-17", "2025-05-26", "2025-06-19",
    "2025-07-04", "2025-09-01", "2025-10-13", "2025-11-11", "2025-11-27",
    "2025-12-25",
    # 2026
    "2026-01-01", "2026-01-19", "2026-02-16", "2026-05-25", "2026-06-19",
    "2026-07-03", "2026-09-07", "2026-10-12", "2026-11-11", "2026-11-26",
    "2026-12-25",
)


def parse_date(value: date | str) -> date:
    """Parse a ``YYYY-MM-DD`` string (or pass a date through)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise ValueError(f"Invalid calendar date {value!r}, expected YYYY-MM-DD")


class HolidayCalendar:
    """Immutable set of holiday dates with exact-date membership.

    The calendar holds no mutable state after construction, so one instance
    can be shared freely between threads and requests.
    """

    __slots__ = ("_dates", "_sorted")

    def __init__(self, dates: Iterable[date | str]) -> None:
        self._dates: frozenset[date] = frozenset(parse_date(d) for d in dates)
        self._sorted: tuple[date, ...] = tuple(sorted(self._dates))

    @classmethod
    def us_federal(cls, years: Iterable[int] | None = None) -> HolidayCalendar:
        """Build the US federal calendar, optionally limited to some years."""
        if years is None:
            return cls(US_FEDERAL_HOLIDAYS)
        wanted = set(years)
        return cls(d for d in US_FEDERAL_HOLIDAYS if int(d[:4]) in wanted)

    def is_holiday(self, day: date) -> bool:
        """Return True if ``day`` is in the table."""
        return day in self._dates

    def holidays_between(self, start: date, end: date) -> list[date]:
        """Holidays within ``[start, end]``, ascending."""
        return [d for d in self._sorted if start <= d <= end]

    @property
    def covered_years(self) -> tuple[int, ...]:
        return tuple(sorted({d.year for d in self._dates}))

    def covers(self, start: date, end: date) -> bool:
        """Whether every year touched by ``[start, end]`` is in the table."""
        years = set(self.covered_years)
        return all(year in years for year in range(start.year, end.year + 1))

    def __contains__(self, day: object) -> bool:
        return day in self._dates

    def __iter__(self) -> Iterator[date]:
        return iter(self._sorted)

    def __len__(self) -> int:
        return len(self._dates)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HolidayCalendar):
            return NotImplemented
        return self._dates == other._dates

    def __hash__(self) -> int:
        return hash(self._dates)

    def __repr__(self) -> str:
        return (
            f"HolidayCalendar(holidays={len(self._dates)}, "
            f"years={list(self.covered_years)})"
        )


@lru_cache(maxsize=1)
def get_holiday_calendar() -> HolidayCalendar:
    """Process-wide default calendar, honouring HOLIDAY_YEARS."""
    years = get_settings().holiday_years
    return HolidayCalendar.us_federal(years or None)
