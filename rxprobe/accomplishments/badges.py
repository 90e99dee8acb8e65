"""Human-readable descriptions and icons for detection tags."""

from rxprobe.core.rules.tags import NOMINAL_FORM, SCOPED_PATTERN_ALIASES, split_medication_tag
from rxprobe.core.types import Medication
from rxprobe.utils.constants import Constants

DEFAULT_ICON = "•"

BADGE_ICONS: dict[str, str] = {
    # Range and length boundaries
    "below_min": "⇊",
    "boundary_length_min": "⇩",
    "boundary_min": "↓",
    "nominal_value": "✓",
    "invalid_value": "✗",
    "boundary_max": "↑",
    "boundary_length_above_max": "⬆",
    "above_max": "⇈",
    "boundary_length_max": "⇧",
    "total_above_max": "∑⇈",
    "total_boundary_max": "∑↑",
    "boundary_length_total_max": "∑⬆",
    # Numeric shape
    "non_numeric": "#",
    "negative_value": "−",
    "decimal_value": ".",
    "comma_decimal": ",",
    "multiple_decimals": "..",
    "precision_high": "≈",
    "starts_with_plus": "+",
    # Dates
    "invalid_format": "📅",
    "invalid_month": "13",
    "invalid_day": "32",
    "invalid_day_for_30day_month": "31",
    "invalid_february_day": "30",
    "invalid_leap_year_february": "29",
    "future_date": "⭐",
    # Text shape
    "empty_value": "∅",
    "leading_space": "←",
    "trailing_space": "→",
    "middle_space": "↔",
    "non_alphanumeric": "@",
    "non_ascii": "™",
    "non_printable": "¶",
    "contains_html": "⟨⟩",
    "contains_xss": "js",
    "contains_sql_injection": ";−",
    # Form level
    "enter_submit": "⏎",
    "nominal_form": "✓",
    "storage_tampering": "🔒",
    "concurrent_session": "||",
}

TAG_DESCRIPTIONS: dict[str, str] = {
    "empty_value": "Empty",
    "leading_space": " Leading space",
    "trailing_space": "Trailing space ",
    "middle_space": "Middle space",
    "non_alphanumeric": "Non-alphanumeric",
    "non_ascii": "Non-ASCII",
    "non_printable": "Non-printable",
    "contains_html": "HTML",
    "contains_xss": "XSS",
    "contains_sql_injection": "SQL injection",
    "invalid_value": "Invalid value",
    "boundary_length_min": "Min Boundary",
    "boundary_length_max": "Length Max",
    "boundary_length_above_max": "Length Above Max",
    "boundary_length_total_max": "Length Total Max",
    "invalid_format": "Wrong format",
    "invalid_month": "Wrong month",
    "invalid_day": "Wrong day",
    "invalid_day_for_30day_month": "31 day",
    "invalid_february_day": "Feb 30/31",
    "invalid_leap_year_february": "Leap day",
    "future_date": "Future",
    "absolute_minimum": "Absolute Min",
    "non_numeric": "Non-numeric",
    "negative_value": "Minus Sign",
    "decimal_value": "Decimal",
    "comma_decimal": "Comma",
    "multiple_decimals": "Decimals",
    "precision_high": "High Precision",
    "starts_with_plus": "Plus Sign",
    "below_min": "Below Lower Boundary",
    "boundary_min": "Lower Boundary",
    "nominal_value": "Nominal",
    "boundary_max": "Upper Boundary",
    "above_max": "Above Upper Boundary",
    "enter_submit": "Using Enter",
    "nominal_form": "Nominal",
    "storage_tampering": "Storage tampering",
    "concurrent_session": "Concurrent session",
}

# Descriptions of medication-scoped patterns, prefixed with the medication label
SCOPED_PATTERN_DESCRIPTIONS: dict[str, str] = {
    "below_min": "Below Lower Boundary",
    "boundary_min": "Lower Boundary",
    "nominal": "Nominal",
    "boundary_max": "Upper Boundary",
    "above_max": "Above Upper Boundary",
    "total_boundary_max": "Total Upper Boundary",
    "total_above_max": "Total Above Upper Boundary",
}


def _form_medication(tag: str) -> Medication | None:
    prefix = f"{NOMINAL_FORM}{Constants.MEDICATION_TAG_SEPARATOR}"
    if not tag.startswith(prefix):
        return None
    try:
        return Medication(tag[len(prefix):])
    except ValueError:
        return None


def describe_tag(tag: str) -> str:
    """Short description shown as a badge tooltip.

    Args:
        tag: Detection tag

    Returns:
        Description, or the tag itself when the vocabulary has none
    """
    if tag in TAG_DESCRIPTIONS:
        return TAG_DESCRIPTIONS[tag]

    scoped = split_medication_tag(tag)
    if scoped is not None:
        medication, pattern = scoped
        description = SCOPED_PATTERN_DESCRIPTIONS.get(pattern)
        if description is not None:
            return f"{medication.label} {description}"
        return tag

    medication = _form_medication(tag)
    if medication is not None:
        return f"{medication.label} {TAG_DESCRIPTIONS[NOMINAL_FORM]}"

    return tag


def icon_for_tag(tag: str) -> str:
    """Badge icon of a tag; scoped tags use the icon of their base pattern."""
    scoped = split_medication_tag(tag)
    if scoped is not None:
        _, pattern = scoped
        return BADGE_ICONS.get(SCOPED_PATTERN_ALIASES.get(pattern, pattern), DEFAULT_ICON)

    if _form_medication(tag) is not None:
        return BADGE_ICONS[NOMINAL_FORM]

    return BADGE_ICONS.get(tag, DEFAULT_ICON)
