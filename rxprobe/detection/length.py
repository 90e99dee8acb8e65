"""Input length boundary detection."""

from rxprobe.utils.constants import Constants


def detect_length_boundaries(
    length: int,
    max_length: int,
    total_max_length: int = Constants.TOTAL_MAX_LENGTH,
    detect_min: bool = False,
) -> set[str]:
    """Classify an input length against a field's length tiers.

    Tiers: exactly one character (optional), exactly the field maximum,
    between the field maximum and the hard ceiling, and exactly the ceiling.

    Args:
        length: Length of the value being classified
        max_length: Field-specific maximum length
        total_max_length: Hard ceiling shared by all fields
        detect_min: Whether a single-character value earns a boundary tag

    Returns:
        Set of length boundary tags (at most one per tier)
    """
    detections: set[str] = set()

    if detect_min and length == 1:
        detections.add("boundary_length_min")
    if length == max_length:
        detections.add("boundary_length_max")
    if max_length < length < total_max_length:
        detections.add("boundary_length_above_max")
    if length == total_max_length:
        detections.add("boundary_length_total_max")

    return detections
