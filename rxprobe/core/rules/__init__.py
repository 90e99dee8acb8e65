"""Rule tables, tag vocabulary and messages."""

from rxprobe.core.rules.limits import (
    AGE_GATES,
    GENERIC_LIMITS,
    GENERIC_MAX_EXEMPTIONS,
    MEDICATION_LIMITS,
    TOTAL_DOSE_FACTORS,
    AgeGate,
    RangeLimits,
    RangeScope,
    resolve_range_scope,
)
from rxprobe.core.rules.tags import (
    RangePattern,
    nominal_form_tag,
    nominal_tag,
    scoped_tag,
    split_medication_tag,
)

__all__ = [
    "AGE_GATES",
    "GENERIC_LIMITS",
    "GENERIC_MAX_EXEMPTIONS",
    "MEDICATION_LIMITS",
    "TOTAL_DOSE_FACTORS",
    "AgeGate",
    "RangeLimits",
    "RangePattern",
    "RangeScope",
    "nominal_form_tag",
    "nominal_tag",
    "resolve_range_scope",
    "scoped_tag",
    "split_medication_tag",
]
