"""Shared detection for the numeric fields (weight, dosage, frequency)."""

import math

from rxprobe.core.rules.limits import RangeScope
from rxprobe.core.rules.tags import RangePattern, scoped_tag
from rxprobe.detection.length import detect_length_boundaries
from rxprobe.utils.constants import Constants
from rxprobe.utils.helpers import parse_leading_float


def _detect_decimal_shape(trimmed: str) -> set[str]:
    detections: set[str] = set()
    if "." in trimmed:
        detections.add("decimal_value")
        decimal_part = trimmed.split(".")[1]
        if len(decimal_part) > Constants.MAX_DECIMAL_PRECISION:
            detections.add("precision_high")
    return detections


def detect_numeric_shape(
    trimmed: str,
    stop_on_non_numeric: bool = True,
) -> tuple[set[str], float | None]:
    """Detect the separator, sign and precision patterns of a numeric input.

    Args:
        trimmed: Trimmed, non-empty field value
        stop_on_non_numeric: Skip the decimal and sign checks when the value
            has no numeric prefix

    Returns:
        Tuple of (detections, parsed value or None when not numeric)
    """
    detections = detect_length_boundaries(len(trimmed), Constants.NUMERIC_MAX_LENGTH)

    if "," in trimmed:
        detections.add("comma_decimal")
    if trimmed.count(".") > 1:
        detections.add("multiple_decimals")

    number: float | None = parse_leading_float(trimmed)
    if math.isnan(number):
        detections.add("non_numeric")
        number = None
        if stop_on_non_numeric:
            return detections, None

    detections |= _detect_decimal_shape(trimmed)

    if number is not None and number < 0:
        detections.add("negative_value")
    if trimmed.startswith("+"):
        detections.add("starts_with_plus")

    return detections, number


def classify_range(
    number: float,
    scope: RangeScope,
    suppress_nominal: bool = False,
) -> set[str]:
    """Classify a number against a scope's range.

    The checks are independent ``if``s: a value sitting exactly on a
    boundary earns both the boundary tag and the nominal tag.

    Args:
        number: Parsed field value
        scope: Range and tag scope to classify against
        suppress_nominal: Withhold the nominal tag (total dose above maximum)

    Returns:
        Set of scoped range tags
    """
    limits = scope.limits
    detections: set[str] = set()

    if 0 < number < limits.min_value:
        detections.add(scoped_tag(RangePattern.BELOW_MIN, scope.medication))
    if number == limits.min_value:
        detections.add(scoped_tag(RangePattern.BOUNDARY_MIN, scope.medication))
    if limits.min_value <= number <= limits.max_value and not suppress_nominal:
        detections.add(scoped_tag(RangePattern.NOMINAL, scope.medication))
    if number == limits.max_value:
        detections.add(scoped_tag(RangePattern.BOUNDARY_MAX, scope.medication))
    if number > limits.max_value:
        detections.add(scoped_tag(RangePattern.ABOVE_MAX, scope.medication))

    return detections
