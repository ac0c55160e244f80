"""Holiday listing endpoint."""

from typing import Annotated

from fastapi import APIRouter, Query

from salary_calculator.api.dependencies import Calendar
from salary_calculator.api.schemas import HolidayItem, HolidayListResponse

router = APIRouter(prefix="/holidays", tags=["holidays"])


@router.get("", response_model=HolidayListResponse)
def list_holidays(
    calendar: Calendar,
    year: Annotated[int | None, Query(ge=1, le=9999)] = None,
) -> HolidayListResponse:
    """List recognized holidays, optionally for a single year."""
    items = [
        HolidayItem(date=d.isoformat(), weekday=d.strftime("%A"))
        for d in calendar
        if year is None or d.year == year
    ]
    return HolidayListResponse(
        items=items,
        total=len(items),
        covered_years=list(calendar.covered_years),
    )
