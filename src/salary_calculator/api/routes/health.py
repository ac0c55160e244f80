"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, status

from salary_calculator.api.dependencies import Calendar
from salary_calculator.api.schemas import HealthResponse
from salary_calculator.config import get_settings

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
)
def health_check(calendar: Calendar) -> HealthResponse:
    """Check API health and report holiday coverage."""
    years = list(calendar.covered_years)
    return HealthResponse(
        status="healthy" if years else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=get_settings().engine_version,
        holiday_years=years,
    )


@router.get("/ready", status_code=status.HTTP_200_OK)
def readiness_check() -> dict[str, str]:
    """Readiness check for container orchestration."""
    return {"status": "ready"}


@router.get("/live", status_code=status.HTTP_200_OK)
def liveness_check() -> dict[str, str]:
    """Liveness check for container orchestration."""
    return {"status": "alive"}
