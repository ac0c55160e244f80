"""Salary calculation endpoint."""

import logging

from fastapi import APIRouter, HTTPException

from salary_calculator.api.dependencies import Calculator
from salary_calculator.api.schemas import ErrorResponse, SalaryRequest, SalaryResponse
from salary_calculator.calculators import PayRequest
from salary_calculator.calendar import parse_date

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/salary", tags=["salary"])


def build_pay_request(payload: SalaryRequest) -> PayRequest:
    """Turn the wire payload into a PayRequest.

    Blank or malformed dates and a missing or non-positive rate are rejected
    here; range and hours checks are left to the calculator.
    """
    if not payload.start_date.strip() or not payload.end_date.strip():
        raise HTTPException(
            status_code=422,
            detail="Please enter both start and end dates",
        )
    try:
        start = parse_date(payload.start_date)
        end = parse_date(payload.end_date)
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )

    if payload.hourly_rate is None or payload.hourly_rate <= 0:
        raise HTTPException(
            status_code=422,
            detail="Please enter a valid hourly rate",
        )

    return PayRequest(
        start_date=start,
        end_date=end,
        hourly_rate=payload.hourly_rate,
        hours_per_day=payload.hours_per_day,
        worked_weekends=payload.worked_weekends,
        weekend_premium_multiplier=payload.weekend_premium_multiplier,
        exclude_holidays=payload.exclude_holidays,
    )


@router.post(
    "/calculate",
    response_model=SalaryResponse,
    responses={422: {"model": ErrorResponse}},
)
def calculate_salary(payload: SalaryRequest, calculator: Calculator) -> SalaryResponse:
    """Calculate earned wages for a date range.

    Calculator validation failures propagate as ValidationError and are
    turned into 422 responses by the app's exception handler.
    """
    request = build_pay_request(payload)
    breakdown = calculator.calculate(request)
    logger.info(
        "Salary calculated for %s..%s: %s over %d days",
        request.start_date,
        request.end_date,
        breakdown.total_salary,
        breakdown.total_days,
    )
    return SalaryResponse.model_validate(breakdown.to_dict())
