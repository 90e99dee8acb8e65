"""Weight field validation."""

from rxprobe.core.types import FieldName, FormValues, selected_medication
from rxprobe.validation.numeric import parse_numeric_input, validate_range


def validate_weight(value: str | None, form_values: FormValues | None = None) -> list[str]:
    """Validate a weight in kg against generic and medication-specific limits."""
    errors, number = parse_numeric_input(FieldName.WEIGHT, value)
    if number is None:
        return errors
    return validate_range(FieldName.WEIGHT, number, selected_medication(form_values))
