"""Age arithmetic in calendar units.

Medication age gates are expressed in years for minors and months for
infants, so ages are computed by subtracting calendar fields (borrowing the
length of the previous month) rather than by counting elapsed days.
"""

from dataclasses import dataclass
from datetime import date

from rxprobe.core.dates.calendar import DateParts, days_in_month
from rxprobe.utils.constants import Constants


@dataclass(frozen=True, order=True)
class Age:
    """Age as whole years, months and days."""

    years: int
    months: int
    days: int

    @property
    def is_newborn(self) -> bool:
        """Born on the reference day."""
        return self.years == 0 and self.months == 0 and self.days == 0

    @property
    def is_unrealistic(self) -> bool:
        """Older than the oldest realistic age."""
        limit = Constants.MAX_REALISTIC_AGE_YEARS
        return self.years > limit or (
            self.years == limit and (self.months > 0 or self.days > 0)
        )

    @property
    def is_oldest_realistic(self) -> bool:
        """Exactly the oldest realistic age to the day."""
        return self.years == Constants.MAX_REALISTIC_AGE_YEARS and self.months == 0 and self.days == 0

    def is_exactly(self, years: int, months: int = 0) -> bool:
        """True when the age is exactly the given years and months with no extra days."""
        return self.years == years and self.months == months and self.days == 0

    def is_younger_than(self, years: int, months: int = 0) -> bool:
        """True when the age has not yet reached the given years and months."""
        return (self.years, self.months) < (years, months)


def _days_in_previous_month(reference: date) -> int:
    if reference.month == 1:
        return days_in_month(12, reference.year - 1)
    return days_in_month(reference.month - 1, reference.year)


def calculate_age(birth: DateParts, reference: date | None = None) -> Age | None:
    """Compute the age of someone born on a given date.

    Args:
        birth: Parsed date of birth
        reference: Day the age is measured on (defaults to today)

    Returns:
        Age in years/months/days, or None if the birth date is not a real
        calendar date or lies after the reference day
    """
    if not birth.is_calendar_date:
        return None

    reference = reference or date.today()
    if birth.is_after(reference):
        return None

    years = reference.year - birth.year
    months = reference.month - birth.month
    days = reference.day - birth.day

    if days < 0:
        months -= 1
        days += _days_in_previous_month(reference)

    if months < 0:
        years -= 1
        months += 12

    return Age(years=years, months=months, days=days)
