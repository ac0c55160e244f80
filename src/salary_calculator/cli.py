"""Salary Calculator Command Line Interface.

Provides:
- Salary calculation for a date range
- Holiday table listing

Usage:
    python -m salary_calculator.cli calculate --start 2024-01-01 --end 2024-01-31 --rate 25
    python -m salary_calculator.cli calculate --start 2024-01-01 --end 2024-01-07 \\
        --rate 20 --worked-weekends --multiplier 1.5 --json
    python -m salary_calculator.cli holidays --year 2025
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Callable

from salary_calculator.calculators import PayBreakdown, PayRequest, SalaryCalculator, ValidationError
from salary_calculator.calendar import HolidayCalendar, get_holiday_calendar, parse_date
from salary_calculator.logging_config import configure_logging

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_VALIDATION = 2


def parse_iso_date(s: str) -> date:
    """Parse YYYY-MM-DD for argparse."""
    try:
        return parse_date(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_decimal(s: str) -> Decimal:
    """Parse a finite decimal number for argparse."""
    try:
        value = Decimal(s)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"Invalid number: {s!r}")
    if not value.is_finite():
        raise argparse.ArgumentTypeError(f"Number must be finite: {s!r}")
    return value


def format_summary(request: PayRequest, breakdown: PayBreakdown) -> str:
    """Render a plain-text summary of a breakdown."""
    lines = [
        f"Period: {request.start_date.isoformat()} to {request.end_date.isoformat()}",
        f"Total salary: {breakdown.total_salary}",
        f"  {breakdown.total_hours} hours across {breakdown.total_days} days",
        "",
        f"Weekdays: {breakdown.weekday_count:>4}  pay {breakdown.weekday_salary}",
        f"Weekends: {breakdown.weekend_count:>4}  pay {breakdown.weekend_salary}"
        f"  (rate {breakdown.effective_weekend_rate}/h)",
        f"Holidays: {breakdown.holiday_count:>4}  pay {breakdown.holiday_salary}",
    ]
    if breakdown.holiday_dates:
        lines.append("")
        lines.append(f"Holidays in range ({breakdown.holiday_count}):")
        for day in breakdown.holiday_dates:
            lines.append(f"  {day.isoformat()}  {day.strftime('%A')}")
    return "\n".join(lines)


class SalaryCli:
    """Salary calculator command line interface."""

    def __init__(self, calendar: HolidayCalendar | None = None) -> None:
        self.calendar = calendar
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="python -m salary_calculator.cli",
            description="Earned wages over a date range",
        )
        parser.add_argument(
            "--log-level",
            type=str,
            help="Logging level (default: $LOG_LEVEL or INFO)",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # calculate command
        calc = subparsers.add_parser(
            "calculate",
            help="Calculate salary for a date range",
        )
        calc.add_argument(
            "--start",
            type=parse_iso_date,
            required=True,
            help="First day of the range (YYYY-MM-DD)",
        )
        calc.add_argument(
            "--end",
            type=parse_iso_date,
            required=True,
            help="Last day of the range, inclusive (YYYY-MM-DD)",
        )
        calc.add_argument(
            "--rate",
            type=parse_decimal,
            required=True,
            help="Hourly rate",
        )
        calc.add_argument(
            "--hours",
            type=parse_decimal,
            default=Decimal("8"),
            help="Hours worked per day (default: 8)",
        )
        calc.add_argument(
            "--worked-weekends",
            action="store_true",
            help="Count weekend days as worked",
        )
        calc.add_argument(
            "--multiplier",
            type=parse_decimal,
            default=Decimal("1.0"),
            help="Weekend premium multiplier (default: 1.0)",
        )
        calc.add_argument(
            "--include-holidays",
            action="store_true",
            help="Pay holidays at the base rate instead of excluding them",
        )
        calc.add_argument(
            "--json",
            action="store_true",
            help="Print the breakdown as JSON",
        )

        # holidays command
        hol = subparsers.add_parser(
            "holidays",
            help="List recognized holidays",
        )
        hol.add_argument(
            "--year",
            type=int,
            help="Only list holidays in this year",
        )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        if not parsed.command:
            self.parser.print_help()
            return EXIT_ERROR

        configure_logging(parsed.log_level)

        handlers: dict[str, Callable[..., int]] = {
            "calculate": self._cmd_calculate,
            "holidays": self._cmd_holidays,
        }

        handler = handlers.get(parsed.command)
        if handler:
            return handler(parsed)

        print(f"Unknown command: {parsed.command}", file=sys.stderr)
        return EXIT_ERROR

    def _get_calendar(self) -> HolidayCalendar:
        return self.calendar if self.calendar is not None else get_holiday_calendar()

    def _cmd_calculate(self, args: argparse.Namespace) -> int:
        """Calculate salary."""
        request = PayRequest(
            start_date=args.start,
            end_date=args.end,
            hourly_rate=args.rate,
            hours_per_day=args.hours,
            worked_weekends=args.worked_weekends,
            weekend_premium_multiplier=args.multiplier,
            exclude_holidays=not args.include_holidays,
        )

        try:
            breakdown = SalaryCalculator(self._get_calendar()).calculate(request)
        except ValidationError as e:
            print(f"ERROR: {e.reason}", file=sys.stderr)
            return EXIT_VALIDATION

        if args.json:
            print(json.dumps(breakdown.to_dict(), indent=2))
        else:
            print(format_summary(request, breakdown))
        return EXIT_OK

    def _cmd_holidays(self, args: argparse.Namespace) -> int:
        """List holidays."""
        calendar = self._get_calendar()
        days = [d for d in calendar if args.year is None or d.year == args.year]

        if not days:
            years = ", ".join(str(y) for y in calendar.covered_years)
            print(f"No holidays found (covered years: {years or 'none'})")
            return EXIT_OK

        for day in days:
            print(f"{day.isoformat()}  {day.strftime('%A')}")
        print(f"\nTotal: {len(days)}")
        return EXIT_OK


def main() -> int:
    """CLI entry point."""
    cli = SalaryCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
