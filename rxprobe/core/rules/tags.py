"""Detection tag vocabulary and scoped tag construction."""

from enum import Enum

from rxprobe.core.types import Medication
from rxprobe.utils.constants import Constants


class RangePattern(Enum):
    """Range patterns that can be scoped to a medication."""

    BELOW_MIN = "below_min"
    BOUNDARY_MIN = "boundary_min"
    NOMINAL = "nominal"
    BOUNDARY_MAX = "boundary_max"
    ABOVE_MAX = "above_max"
    TOTAL_BOUNDARY_MAX = "total_boundary_max"
    TOTAL_ABOVE_MAX = "total_above_max"


NOMINAL_VALUE = "nominal_value"
INVALID_VALUE = "invalid_value"
EMPTY_VALUE = "empty_value"

NOMINAL_FORM = "nominal_form"
ENTER_SUBMIT = "enter_submit"
STORAGE_TAMPERING = "storage_tampering"
CONCURRENT_SESSION = "concurrent_session"

# Medication patterns whose generic spelling differs from the scoped one
SCOPED_PATTERN_ALIASES: dict[str, str] = {
    "nominal": NOMINAL_VALUE,
    "invalid": INVALID_VALUE,
}


def scoped_tag(pattern: RangePattern, medication: Medication | None) -> str:
    """Build the tag for a range pattern within a scope.

    Generic scope uses the bare pattern name (``nominal`` becomes
    ``nominal_value``); medication scope prefixes the medication name.

    Args:
        pattern: Range pattern that fired
        medication: Medication scope, or None for the generic scope

    Returns:
        Tag string such as ``boundary_min`` or ``aspirin_boundary_min``
    """
    if medication is None:
        if pattern is RangePattern.NOMINAL:
            return NOMINAL_VALUE
        return pattern.value
    return f"{medication.value}{Constants.MEDICATION_TAG_SEPARATOR}{pattern.value}"


def nominal_tag(medication: Medication | None) -> str:
    """Return the nominal tag for a scope."""
    return scoped_tag(RangePattern.NOMINAL, medication)


def nominal_form_tag(medication: Medication) -> str:
    """Return the form-level nominal tag for a medication."""
    return f"{NOMINAL_FORM}{Constants.MEDICATION_TAG_SEPARATOR}{medication.value}"


def split_medication_tag(tag: str) -> tuple[Medication, str] | None:
    """Split a medication-scoped tag into its medication and pattern.

    Args:
        tag: Any detection tag

    Returns:
        (medication, pattern) for scoped tags, None for generic tags
    """
    for medication in Medication:
        prefix = f"{medication.value}{Constants.MEDICATION_TAG_SEPARATOR}"
        if tag.startswith(prefix):
            return medication, tag[len(prefix):]
    return None
