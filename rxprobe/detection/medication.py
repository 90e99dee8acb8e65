"""Medication field detection."""

from rxprobe.core.rules.tags import INVALID_VALUE, NOMINAL_VALUE
from rxprobe.core.types import ACCEPTED_MEDICATIONS, FormValues
from rxprobe.detection.length import detect_length_boundaries
from rxprobe.utils.constants import Constants


def detect_medication(value: str | None, form_values: FormValues | None = None) -> set[str]:
    """Detect medication-specific testing patterns.

    Length tiers use the raw length (surrounding spaces count); the accepted
    value check uses the trimmed, lower-cased value.

    Args:
        value: Raw medication value
        form_values: Form snapshot (unused)

    Returns:
        Set of detection tags, empty for an empty value
    """
    del form_values

    if not value or not value.strip():
        return set()

    detections = detect_length_boundaries(
        len(value), Constants.MEDICATION_MAX_LENGTH, detect_min=True
    )

    if value.strip().lower() in ACCEPTED_MEDICATIONS:
        detections.add(NOMINAL_VALUE)
    else:
        detections.add(INVALID_VALUE)

    return detections
