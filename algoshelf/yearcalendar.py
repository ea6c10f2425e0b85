"""Month-by-month text calendar for a year."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

__all__ = [
    "day_of_week",
    "month_name",
    "days_in_month",
    "format_calendar",
    "main",
]

_MONTH_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)
_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_BLANK_DAY = "\t "


def _check_month_index(month_index: int) -> None:
    if not 0 <= month_index < 12:
        raise ValueError(f"month index must be in 0..11, got {month_index}")


def _is_leap(year: int) -> bool:
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def day_of_week(day: int, month: int, year: int) -> int:
    """Return the weekday of a date, 0 for Sunday through 6 for Saturday.

    ``month`` runs from 1 to 12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month < 3:
        year -= 1
    return (
        year + year // 4 - year // 100 + year // 400 + _MONTH_OFFSETS[month - 1] + day
    ) % 7


def month_name(month_index: int) -> str:
    """Return the English name of a month, 0 for January."""
    _check_month_index(month_index)
    return _MONTH_NAMES[month_index]


def days_in_month(month_index: int, year: int) -> int:
    """Return the number of days in a month, 0 for January."""
    _check_month_index(month_index)
    if month_index == 1 and _is_leap(year):
        return 29
    return _MONTH_LENGTHS[month_index]


def format_calendar(year: int) -> str:
    """Render the whole year as text, one block per month."""
    parts: List[str] = [f"\t Calendar - {year}\n\n"]
    current = day_of_week(1, 1, year)
    for month_index in range(12):
        parts.append(f"\n ------------{month_name(month_index)}-------------\n")
        parts.append(" Sun Mon Tue Wed Thu Fri Sat\n")
        parts.append(_BLANK_DAY * current)
        column = current
        for day in range(1, days_in_month(month_index, year) + 1):
            parts.append(f"{day:5d}")
            column += 1
            if column > 6:
                column = 0
                parts.append("\n")
        if column:
            parts.append("\n")
        current = column
    return "".join(parts)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the calendar for a year given as argument or read from input."""
    parser = argparse.ArgumentParser(
        prog="yearcalendar", description="Print a calendar for a year."
    )
    parser.add_argument("year", nargs="?", type=int, help="the year to print")
    args = parser.parse_args(argv)
    year = args.year
    if year is None:
        try:
            year = int(input("Enter year").strip())
        except ValueError:
            parser.error("year must be an integer")
    sys.stdout.write(format_calendar(year))
    return 0