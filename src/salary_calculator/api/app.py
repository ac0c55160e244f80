"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from salary_calculator import __version__
from salary_calculator.api.routes import health_router, holidays_router, salary_router
from salary_calculator.calculators import ValidationError
from salary_calculator.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging()

    app = FastAPI(
        title="Salary Calculator API",
        description="Earned wages over a date range with weekend and holiday rules",
        version=__version__,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Report rejected pay requests."""
        logger.info("Rejected pay request: %s", exc.reason)
        return JSONResponse(
            status_code=422,
            content={
                "detail": exc.reason,
                "code": "VALIDATION_ERROR",
                "field": exc.field,
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )

    # Include routers
    app.include_router(health_router)
    app.include_router(salary_router, prefix="/api/v1")
    app.include_router(holidays_router, prefix="/api/v1")

    return app


# Default app instance for uvicorn
app = create_app()
