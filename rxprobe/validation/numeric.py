"""Shared validation for the numeric fields (weight, dosage, frequency)."""

import math

from rxprobe.core.rules import messages
from rxprobe.core.rules.limits import (
    GENERIC_LIMITS,
    GENERIC_MAX_EXEMPTIONS,
    MEDICATION_LIMITS,
    RangeLimits,
)
from rxprobe.core.rules.messages import FIELD_MAX_LENGTHS, Messages
from rxprobe.core.types import FieldName, Medication
from rxprobe.utils.helpers import parse_leading_float


def parse_numeric_input(
    field: FieldName,
    value: str | None,
    integer_only: bool = False,
) -> tuple[list[str], float | None]:
    """Run the checks that must pass before a value's range can be judged.

    Order: required (stop), length and numeric (both reported, then stop if
    either failed), integer-only (stop).

    Args:
        field: Numeric field being validated
        value: Raw field value
        integer_only: Reject values with a decimal point

    Returns:
        Tuple of (errors, parsed value); the value is None whenever errors
        stopped validation
    """
    if not value or not value.strip():
        return [messages.required(field)], None

    trimmed = value.strip()
    errors: list[str] = []

    if len(trimmed) > FIELD_MAX_LENGTHS[field]:
        errors.append(messages.max_length(field))

    number = parse_leading_float(trimmed)
    if math.isnan(number):
        errors.append(messages.not_a_number(field))

    if errors:
        return errors, None

    if integer_only and "." in trimmed:
        return [Messages.NOT_AN_INTEGER], None

    return [], number


def _range_errors(
    field: FieldName,
    number: float,
    limits: RangeLimits,
    medication: Medication | None = None,
    check_max: bool = True,
) -> list[str]:
    errors: list[str] = []
    if number < limits.min_value:
        errors.append(messages.below_minimum(field, limits.min_value, medication))
    if check_max and number > limits.max_value:
        errors.append(messages.above_maximum(field, limits.max_value, medication))
    return errors


def validate_range(field: FieldName, number: float, medication: Medication | None) -> list[str]:
    """Check a parsed value against the generic range, then the medication's range.

    Both checks run, so a value outside both ranges gets both messages. A
    medication listed in ``GENERIC_MAX_EXEMPTIONS`` for the field skips the
    generic maximum and is judged by its own maximum alone.

    Args:
        field: Numeric field being validated
        number: Parsed field value
        medication: Selected medication, if recognized

    Returns:
        List of range violation messages
    """
    check_generic_max = medication not in GENERIC_MAX_EXEMPTIONS.get(field, frozenset())
    errors = _range_errors(field, number, GENERIC_LIMITS[field], check_max=check_generic_max)

    if medication is not None:
        limits = MEDICATION_LIMITS[field].get(medication)
        if limits is not None:
            errors.extend(_range_errors(field, number, limits, medication))

    return errors
