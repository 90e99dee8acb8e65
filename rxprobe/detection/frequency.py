"""Frequency field detection."""

from rxprobe.core.rules.limits import resolve_range_scope
from rxprobe.core.types import FieldName, FormValues, selected_medication
from rxprobe.detection.numeric import classify_range, detect_numeric_shape


def detect_frequency(value: str | None, form_values: FormValues | None = None) -> set[str]:
    """Detect frequency (doses per day) testing patterns.

    Unlike weight and dosage, a non-numeric frequency still reports its
    decimal and sign shape; only the range classification is skipped.

    Args:
        value: Raw frequency value
        form_values: Form snapshot, read for the selected medication

    Returns:
        Set of detection tags, empty for an empty value
    """
    if not value or not value.strip():
        return set()

    detections, number = detect_numeric_shape(value.strip(), stop_on_non_numeric=False)
    if number is None:
        return detections

    scope = resolve_range_scope(FieldName.FREQUENCY, selected_medication(form_values))
    return detections | classify_range(number, scope)
