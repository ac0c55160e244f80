"""Entry point for running the application with uvicorn."""

import uvicorn

from salary_calculator.config import settings


def main() -> None:
    """Run the application."""
    uvicorn.run(
        "salary_calculator.api.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
