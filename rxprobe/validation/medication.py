"""Medication field validation."""

from rxprobe.core.rules import messages
from rxprobe.core.rules.messages import FIELD_MAX_LENGTHS, Messages
from rxprobe.core.types import FieldName, FormValues, parse_medication


def validate_medication(value: str | None, form_values: FormValues | None = None) -> list[str]:
    """Validate the medication name.

    Length is measured on the raw value, surrounding whitespace included;
    the accepted-value check ignores case and surrounding whitespace.

    Args:
        value: Raw medication value
        form_values: Unused, accepted for a uniform validator signature

    Returns:
        List of error messages, empty when valid
    """
    if not value or not value.strip():
        return [messages.required(FieldName.MEDICATION)]

    errors: list[str] = []
    if len(value) > FIELD_MAX_LENGTHS[FieldName.MEDICATION]:
        errors.append(messages.max_length(FieldName.MEDICATION))
    if parse_medication(value) is None:
        errors.append(Messages.INVALID_MEDICATION)
    return errors
