"""Date parsing and age calculation."""

from rxprobe.core.dates.age import Age, calculate_age
from rxprobe.core.dates.calendar import (
    FEBRUARY,
    THIRTY_DAY_MONTHS,
    DateParts,
    days_in_month,
    is_leap_year,
    parse_date,
)

__all__ = [
    "FEBRUARY",
    "THIRTY_DAY_MONTHS",
    "Age",
    "DateParts",
    "calculate_age",
    "days_in_month",
    "is_leap_year",
    "parse_date",
]
