"""User-facing validation messages."""

from rxprobe.core.types import FieldName, Medication
from rxprobe.utils.constants import Constants

FIELD_LABELS: dict[FieldName, str] = {
    FieldName.MEDICATION: "Medication",
    FieldName.DATE_OF_BIRTH: "Date of Birth",
    FieldName.WEIGHT: "Weight",
    FieldName.DOSAGE: "Dosage",
    FieldName.FREQUENCY: "Frequency",
}

FIELD_UNITS: dict[FieldName, str] = {
    FieldName.WEIGHT: " kg",
    FieldName.DOSAGE: " mg",
    FieldName.FREQUENCY: "",
}

FIELD_MAX_LENGTHS: dict[FieldName, int] = {
    FieldName.MEDICATION: Constants.MEDICATION_MAX_LENGTH,
    FieldName.WEIGHT: Constants.NUMERIC_MAX_LENGTH,
    FieldName.DOSAGE: Constants.NUMERIC_MAX_LENGTH,
    FieldName.FREQUENCY: Constants.NUMERIC_MAX_LENGTH,
}


class Messages:
    """Fixed message strings."""

    INVALID_MEDICATION = (
        "Medication must be one of: "
        + ", ".join(medication.value for medication in Medication)
    )
    DATE_FORMAT = "Date of Birth must be in YYYY-MM-DD format"
    MONTH_RANGE = "Month must be between 1 and 12"
    DAY_RANGE = "Day must be between 1 and 31"
    FUTURE_DATE = "Date of Birth cannot be in the future"
    UNREALISTIC_AGE = (
        f"Date of Birth must result in a realistic age between 0 and "
        f"{Constants.MAX_REALISTIC_AGE_YEARS} years"
    )
    NOT_AN_INTEGER = "Frequency must be a whole number"


def _number(value: float) -> str:
    return f"{value:g}"


def required(field: FieldName) -> str:
    """'<Field> is required'."""
    return f"{FIELD_LABELS[field]} is required"


def max_length(field: FieldName) -> str:
    """'<Field> must not exceed N characters'."""
    return f"{FIELD_LABELS[field]} must not exceed {FIELD_MAX_LENGTHS[field]} characters"


def not_a_number(field: FieldName) -> str:
    """'<Field> must be a valid number'."""
    return f"{FIELD_LABELS[field]} must be a valid number"


def below_minimum(field: FieldName, minimum: float, medication: Medication | None = None) -> str:
    """Range message for a value under the minimum, optionally medication-scoped."""
    subject = _subject(field, medication)
    return f"{subject} must be at least {_number(minimum)}{FIELD_UNITS[field]}"


def above_maximum(field: FieldName, maximum: float, medication: Medication | None = None) -> str:
    """Range message for a value over the maximum, optionally medication-scoped."""
    subject = _subject(field, medication)
    return f"{subject} must not exceed {_number(maximum)}{FIELD_UNITS[field]}"


def total_dose(medication: Medication, factor: int) -> str:
    """Cross-field total dose formula message."""
    return (
        f"{medication.label} total dose must satisfy: "
        f"dosage × frequency < weight × {factor}"
    )


def february_overflow(max_days: int, leap_year: bool) -> str:
    """Message for a February day past the month's end."""
    suffix = " in leap year" if leap_year else ""
    return f"February has a maximum of {max_days} days{suffix}"


def thirty_day_month_overflow(month: int) -> str:
    """Message for day 31 in a 30-day month."""
    return f"Month {month} has a maximum of 30 days"


def day_invalid_for_month(month: int) -> str:
    """Message for a day past the end of a 31-day month."""
    return f"Day is invalid for month {month}"


def age_restriction(medication: Medication, years: int, months: int) -> str:
    """Message for a patient younger than a medication's minimum age."""
    if years:
        return f"Children (age {years} and under) cannot take {medication.value}"
    return f"Infants (under {months} months old) cannot take {medication.value}"


def _subject(field: FieldName, medication: Medication | None) -> str:
    if medication is None:
        return FIELD_LABELS[field]
    return f"{medication.label} {FIELD_LABELS[field].lower()}"
