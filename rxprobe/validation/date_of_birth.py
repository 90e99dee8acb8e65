"""Date of birth field validation."""

from datetime import date

from rxprobe.core.dates import (
    FEBRUARY,
    THIRTY_DAY_MONTHS,
    DateParts,
    calculate_age,
    days_in_month,
    is_leap_year,
    parse_date,
)
from rxprobe.core.rules import messages
from rxprobe.core.rules.limits import AGE_GATES
from rxprobe.core.rules.messages import Messages
from rxprobe.core.types import FieldName, FormValues, selected_medication


def _calendar_errors(parts: DateParts) -> list[str]:
    errors: list[str] = []

    if not parts.month_in_range:
        errors.append(Messages.MONTH_RANGE)
    if not parts.day_in_range:
        errors.append(Messages.DAY_RANGE)

    if parts.month_in_range:
        max_days = days_in_month(parts.month, parts.year)
        if parts.day > max_days:
            if parts.month == FEBRUARY:
                errors.append(messages.february_overflow(max_days, is_leap_year(parts.year)))
            elif parts.month in THIRTY_DAY_MONTHS:
                errors.append(messages.thirty_day_month_overflow(parts.month))
            else:
                errors.append(messages.day_invalid_for_month(parts.month))

    return errors


def validate_date_of_birth(
    value: str | None,
    form_values: FormValues | None = None,
    today: date | None = None,
) -> list[str]:
    """Validate a YYYY-MM-DD date of birth.

    Calendar errors are all reported together. Future-date, realistic-age
    and medication age checks only run once the date is a real calendar day.

    Args:
        value: Raw date of birth value
        form_values: Form snapshot, read for the selected medication
        today: Reference day (defaults to today)

    Returns:
        List of error messages, empty when valid
    """
    if not value or not value.strip():
        return [messages.required(FieldName.DATE_OF_BIRTH)]

    parts = parse_date(value)
    if parts is None:
        return [Messages.DATE_FORMAT]

    errors = _calendar_errors(parts)
    if not parts.is_calendar_date:
        return errors

    today = today or date.today()
    if parts.is_after(today):
        errors.append(Messages.FUTURE_DATE)

    age = calculate_age(parts, today)
    if age is None:
        return errors

    if age.is_unrealistic:
        errors.append(Messages.UNREALISTIC_AGE)

    medication = selected_medication(form_values)
    gate = AGE_GATES.get(medication) if medication else None
    if gate is not None and age.is_younger_than(gate.years, gate.months):
        errors.append(messages.age_restriction(medication, gate.years, gate.months))

    return errors
