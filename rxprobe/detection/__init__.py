"""Testing-pattern detection for the prescription form fields."""

from collections.abc import Callable
from datetime import date

from rxprobe.core.types import FieldName, FormValues, field_value
from rxprobe.detection.date_of_birth import detect_date_of_birth
from rxprobe.detection.dosage import compute_total_dose, detect_dosage
from rxprobe.detection.field import detect_field_patterns
from rxprobe.detection.form import SubmissionContext, detect_form
from rxprobe.detection.frequency import detect_frequency
from rxprobe.detection.medication import detect_medication
from rxprobe.detection.weight import detect_weight

FieldDetector = Callable[[str | None, FormValues | None], set[str]]

FIELD_DETECTORS: dict[FieldName, FieldDetector] = {
    FieldName.MEDICATION: detect_medication,
    FieldName.WEIGHT: detect_weight,
    FieldName.DOSAGE: detect_dosage,
    FieldName.FREQUENCY: detect_frequency,
}


def detect(
    field: FieldName,
    value: str | None,
    form_values: FormValues | None = None,
    today: date | None = None,
) -> set[str]:
    """Detect all testing patterns of one field: generic shape plus field-specific.

    Args:
        field: Field the value belongs to
        value: Raw field value
        form_values: Full form snapshot (medication, weight, frequency are read from it)
        today: Reference day for date of birth checks (defaults to today)

    Returns:
        Set of detection tags
    """
    detections = detect_field_patterns(value, form_values)
    if field is FieldName.DATE_OF_BIRTH:
        return detections | detect_date_of_birth(value, form_values, today)
    return detections | FIELD_DETECTORS[field](value, form_values)


def detect_all(form_values: FormValues, today: date | None = None) -> dict[FieldName, set[str]]:
    """Run detection for every field of a form snapshot."""
    return {
        field: detect(field, field_value(form_values, field), form_values, today)
        for field in FieldName
    }


__all__ = [
    "FIELD_DETECTORS",
    "SubmissionContext",
    "compute_total_dose",
    "detect",
    "detect_all",
    "detect_date_of_birth",
    "detect_dosage",
    "detect_field_patterns",
    "detect_form",
    "detect_frequency",
    "detect_medication",
    "detect_weight",
]
