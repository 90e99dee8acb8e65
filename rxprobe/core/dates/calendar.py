"""Calendar helpers for date of birth parsing."""

import re
from dataclasses import dataclass
from datetime import date

DATE_PATTERN = re.compile(r"^\d{4}-\d{1,2}-\d{1,2}$", re.ASCII)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})
FEBRUARY = 2


def is_leap_year(year: int) -> bool:
    """Divisible by 4 and not by 100, or divisible by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Number of days in a month (1-12) of a given year."""
    if month == FEBRUARY and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


@dataclass(frozen=True)
class DateParts:
    """Year, month and day read from a YYYY-MM-DD string.

    The parts are not range-checked; month 13 or day 0 parse fine so that
    callers can report exactly what is wrong.
    """

    year: int
    month: int
    day: int

    @property
    def month_in_range(self) -> bool:
        return 1 <= self.month <= 12

    @property
    def day_in_range(self) -> bool:
        return 1 <= self.day <= 31

    @property
    def is_calendar_date(self) -> bool:
        """True when month and day name a real day of that year."""
        return self.month_in_range and 1 <= self.day <= days_in_month(self.month, self.year)

    def is_after(self, reference: date) -> bool:
        """True when this date falls strictly after the reference day."""
        return (self.year, self.month, self.day) > (reference.year, reference.month, reference.day)


def parse_date(value: str) -> DateParts | None:
    """Parse a YYYY-MM-DD string with 1-2 digit month and day.

    Args:
        value: Raw date string (surrounding whitespace is ignored)

    Returns:
        DateParts, or None if the string does not have the expected shape
    """
    trimmed = value.strip()
    if not DATE_PATTERN.match(trimmed):
        return None
    year, month, day = (int(part) for part in trimmed.split("-"))
    return DateParts(year=year, month=month, day=day)
