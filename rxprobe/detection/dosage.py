"""Dosage field detection, including the cross-field total dose formula."""

from dataclasses import dataclass

from loguru import logger

from rxprobe.core.rules.limits import TOTAL_DOSE_FACTORS, resolve_range_scope
from rxprobe.core.rules.tags import RangePattern, scoped_tag
from rxprobe.core.types import FieldName, FormValues, Medication, field_value, selected_medication
from rxprobe.detection.numeric import classify_range, detect_numeric_shape
from rxprobe.utils.helpers import parse_positive_float


@dataclass(frozen=True)
class TotalDose:
    """Daily dose compared with the weight-based daily maximum."""

    total: float
    maximum: float

    @property
    def at_maximum(self) -> bool:
        return self.total == self.maximum

    @property
    def above_maximum(self) -> bool:
        return self.total > self.maximum


def compute_total_dose(
    dosage: float,
    medication: Medication | None,
    form_values: FormValues | None,
) -> TotalDose | None:
    """Compute the total daily dose for medications with a weight-based limit.

    Args:
        dosage: Parsed dosage (mg per dose)
        medication: Selected medication
        form_values: Form snapshot, read for weight and frequency

    Returns:
        TotalDose, or None when the medication has no formula or any input
        is missing, unparseable or not positive
    """
    factor = TOTAL_DOSE_FACTORS.get(medication) if medication else None
    if factor is None or dosage <= 0:
        return None

    weight = parse_positive_float(field_value(form_values, FieldName.WEIGHT))
    frequency = parse_positive_float(field_value(form_values, FieldName.FREQUENCY))
    if weight is None or frequency is None:
        return None

    return TotalDose(total=dosage * frequency, maximum=weight * factor)


def detect_dosage(value: str | None, form_values: FormValues | None = None) -> set[str]:
    """Detect dosage testing patterns, scoped to the selected medication.

    For ibuprofen and paracetamol the total daily dose is checked against
    the weight-based maximum; exceeding it withholds the medication's
    nominal tag even when the single dose is in range.

    Args:
        value: Raw dosage value (mg)
        form_values: Form snapshot, read for medication, weight and frequency

    Returns:
        Set of detection tags, empty for an empty value
    """
    if not value or not value.strip():
        return set()

    detections, number = detect_numeric_shape(value.strip())
    if number is None:
        return detections

    if number == 0:
        detections.add("absolute_minimum")

    scope = resolve_range_scope(FieldName.DOSAGE, selected_medication(form_values))
    total_dose = compute_total_dose(number, scope.medication, form_values)

    total_above_max = False
    if total_dose is not None:
        logger.debug(
            f"{scope.medication.value} total dose {total_dose.total:g} "
            f"vs maximum {total_dose.maximum:g}"
        )
        if total_dose.at_maximum:
            detections.add(scoped_tag(RangePattern.TOTAL_BOUNDARY_MAX, scope.medication))
        if total_dose.above_maximum:
            detections.add(scoped_tag(RangePattern.TOTAL_ABOVE_MAX, scope.medication))
            total_above_max = True

    return detections | classify_range(number, scope, suppress_nominal=total_above_max)
