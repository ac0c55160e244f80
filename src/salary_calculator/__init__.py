"""Wage calculation over calendar date ranges with weekend and holiday rules."""

__version__ = "1.0.0"
