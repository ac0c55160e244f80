"""Pydantic schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema using camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Salary schemas
# ============================================================================


class SalaryRequest(CamelModel):
    """Schema for a salary calculation request.

    Dates arrive as YYYY-MM-DD strings; an empty string means the field was
    left blank and is rejected by the route.
    """

    start_date: str = ""
    end_date: str = ""
    hourly_rate: Decimal | None = None
    hours_per_day: Decimal = Decimal("8")
    worked_weekends: bool = False
    weekend_premium_multiplier: Decimal = Field(default=Decimal("1.0"), ge=1, le=3)
    exclude_holidays: bool = True


class SalaryResponse(CamelModel):
    """Schema for a salary breakdown."""

    total_salary: float
    total_hours: float
    total_days: int
    weekday_count: int
    weekend_count: int
    holiday_count: int
    holiday_dates: list[str]
    weekday_salary: float
    weekend_salary: float
    holiday_salary: float
    effective_weekend_rate: float


# ============================================================================
# Holiday schemas
# ============================================================================


class HolidayItem(BaseModel):
    """A single holiday entry."""

    date: str  # YYYY-MM-DD
    weekday: str


class HolidayListResponse(BaseModel):
    """Schema for listing holidays."""

    items: list[HolidayItem]
    total: int
    covered_years: list[int]


# ============================================================================
# Health / error schemas
# ============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    holiday_years: list[int]


class ErrorResponse(BaseModel):
    """Schema for error response."""

    detail: str
    code: str | None = None
    field: str | None = None
