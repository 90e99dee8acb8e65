"""Field validators for the prescription form."""

from collections.abc import Callable
from datetime import date

from rxprobe.core.types import FieldName, FormValues, field_value
from rxprobe.validation.date_of_birth import validate_date_of_birth
from rxprobe.validation.dosage import validate_dosage
from rxprobe.validation.frequency import validate_frequency
from rxprobe.validation.medication import validate_medication
from rxprobe.validation.weight import validate_weight

FieldValidator = Callable[[str | None, FormValues | None], list[str]]

FIELD_VALIDATORS: dict[FieldName, FieldValidator] = {
    FieldName.MEDICATION: validate_medication,
    FieldName.WEIGHT: validate_weight,
    FieldName.DOSAGE: validate_dosage,
    FieldName.FREQUENCY: validate_frequency,
}


def validate(
    field: FieldName,
    value: str | None,
    form_values: FormValues | None = None,
    today: date | None = None,
) -> list[str]:
    """Validate one field value.

    Args:
        field: Field the value belongs to
        value: Raw field value
        form_values: Full form snapshot for cross-field rules
        today: Reference day for date of birth checks (defaults to today)

    Returns:
        Ordered list of error messages, empty when the value is valid
    """
    if field is FieldName.DATE_OF_BIRTH:
        return validate_date_of_birth(value, form_values, today)
    return FIELD_VALIDATORS[field](value, form_values)


def validate_all(form_values: FormValues, today: date | None = None) -> dict[FieldName, list[str]]:
    """Validate every field of a form snapshot, keeping only fields with errors."""
    results = {
        field: validate(field, field_value(form_values, field), form_values, today)
        for field in FieldName
    }
    return {field: errors for field, errors in results.items() if errors}


__all__ = [
    "FIELD_VALIDATORS",
    "validate",
    "validate_all",
    "validate_date_of_birth",
    "validate_dosage",
    "validate_frequency",
    "validate_medication",
    "validate_weight",
]
