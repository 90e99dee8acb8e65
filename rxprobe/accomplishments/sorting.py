"""Display ordering of accomplishment badges."""

from collections.abc import Iterable

from rxprobe.core.rules.tags import SCOPED_PATTERN_ALIASES, nominal_form_tag, split_medication_tag
from rxprobe.core.types import Medication

BADGE_SORT_ORDER: tuple[str, ...] = (
    # Shape and injection
    "empty_value",
    "leading_space",
    "middle_space",
    "trailing_space",
    "contains_html",
    "contains_sql_injection",
    "contains_xss",
    "non_alphanumeric",
    "non_ascii",
    "non_printable",
    # Numeric shape
    "non_numeric",
    "starts_with_plus",
    "negative_value",
    "decimal_value",
    "multiple_decimals",
    "comma_decimal",
    "precision_high",
    # Range and length boundaries
    "below_min",
    "boundary_length_min",
    "boundary_min",
    "nominal_value",
    "boundary_max",
    "boundary_length_max",
    "above_max",
    # Dates
    "invalid_format",
    "invalid_month",
    "invalid_february_day",
    "invalid_leap_year_february",
    "invalid_day",
    "invalid_day_for_30day_month",
    "invalid_value",
    # Form level
    "nominal_form",
    *(nominal_form_tag(medication) for medication in Medication),
    "enter_submit",
    "concurrent_session",
    "storage_tampering",
)

_PATTERN_RANK: dict[str, int] = {pattern: rank for rank, pattern in enumerate(BADGE_SORT_ORDER)}
_UNKNOWN_RANK = len(BADGE_SORT_ORDER)
_MEDICATION_RANK: dict[Medication, int] = {
    medication: rank for rank, medication in enumerate(Medication)
}


def pattern_rank(pattern: str) -> int:
    """Position of a pattern in the display order; unknown patterns rank last."""
    return _PATTERN_RANK.get(pattern, _UNKNOWN_RANK)


def badge_sort_key(tag: str) -> tuple[int, int, int, str]:
    """Sort key placing generic tags first, then medication-scoped tags.

    Scoped tags are ordered by medication, then by pattern. Tags tied on
    rank (unknown patterns) fall back to their name so the order is total.

    Args:
        tag: Detection tag

    Returns:
        Tuple of (scope group, medication rank, pattern rank, tag)
    """
    scoped = split_medication_tag(tag)
    if scoped is None:
        return (0, 0, pattern_rank(tag), tag)

    medication, pattern = scoped
    pattern = SCOPED_PATTERN_ALIASES.get(pattern, pattern)
    return (1, _MEDICATION_RANK[medication], pattern_rank(pattern), tag)


def sort_for_display(tags: Iterable[str]) -> list[str]:
    """Return a deduplicated tag collection in badge display order."""
    return sorted(set(tags), key=badge_sort_key)
