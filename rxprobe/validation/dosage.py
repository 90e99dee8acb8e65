"""Dosage field validation."""

from rxprobe.core.rules import messages
from rxprobe.core.rules.limits import TOTAL_DOSE_FACTORS
from rxprobe.core.types import FieldName, FormValues, selected_medication
from rxprobe.detection.dosage import compute_total_dose
from rxprobe.validation.numeric import parse_numeric_input, validate_range


def validate_dosage(value: str | None, form_values: FormValues | None = None) -> list[str]:
    """Validate a single dose in mg, plus the total daily dose where a formula applies.

    The total dose is valid only while ``dosage × frequency`` stays strictly
    below ``weight × factor``; reaching the maximum is already an error.

    Args:
        value: Raw dosage value
        form_values: Form snapshot, read for medication, weight and frequency

    Returns:
        List of error messages, empty when valid
    """
    errors, number = parse_numeric_input(FieldName.DOSAGE, value)
    if number is None:
        return errors

    medication = selected_medication(form_values)
    errors = validate_range(FieldName.DOSAGE, number, medication)

    total_dose = compute_total_dose(number, medication, form_values)
    if total_dose is not None and total_dose.total >= total_dose.maximum:
        errors.append(messages.total_dose(medication, TOTAL_DOSE_FACTORS[medication]))

    return errors
