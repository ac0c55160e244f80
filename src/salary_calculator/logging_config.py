"""Logging setup shared by the API and the CLI."""

from __future__ import annotations

import logging

from salary_calculator.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once, using LOG_LEVEL unless overridden."""
    resolved = (level or get_settings().log_level).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("salary_calculator").setLevel(resolved)
