"""API routes."""

from salary_calculator.api.routes.health import router as health_router
from salary_calculator.api.routes.holidays import router as holidays_router
from salary_calculator.api.routes.salary import router as salary_router

__all__ = ["health_router", "holidays_router", "salary_router"]
