"""Frequency field validation."""

from rxprobe.core.types import FieldName, FormValues, selected_medication
from rxprobe.validation.numeric import parse_numeric_input, validate_range


def validate_frequency(value: str | None, form_values: FormValues | None = None) -> list[str]:
    """Validate doses per day: a whole number within the medication's limits."""
    errors, number = parse_numeric_input(FieldName.FREQUENCY, value, integer_only=True)
    if number is None:
        return errors
    return validate_range(FieldName.FREQUENCY, number, selected_medication(form_values))
