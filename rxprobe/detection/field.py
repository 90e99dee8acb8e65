"""Field-agnostic detection of raw string shape."""

import re

from rxprobe.core.rules.tags import EMPTY_VALUE
from rxprobe.core.types import FormValues

_NON_ALPHANUMERIC = re.compile(r"[^0-9a-zA-Z -]")
_HTML_TAG = re.compile(r"<[^\s<>][^<>]*>")
_SCRIPT_TAG = re.compile(r"<\s*script\b", re.IGNORECASE)
_SQL_KEYWORD_AFTER_SEMICOLON = re.compile(
    r";\s*(DROP|DELETE|INSERT|UPDATE|SELECT|UNION|ALTER|CREATE|EXEC|EXECUTE)\b",
    re.IGNORECASE,
)
_LEADING_SEMICOLON = re.compile(r"^\s*;")


def _has_non_ascii(value: str) -> bool:
    return any(ord(char) > 127 for char in value)


def _has_non_printable(value: str) -> bool:
    return any(ord(char) < 32 or ord(char) == 127 for char in value)


def _looks_like_sql_injection(value: str) -> bool:
    return bool(_SQL_KEYWORD_AFTER_SEMICOLON.search(value) or _LEADING_SEMICOLON.match(value))


def detect_field_patterns(value: str | None, form_values: FormValues | None = None) -> set[str]:
    """Classify the shape of a raw value, regardless of which field it came from.

    Checks are independent of each other except that an empty value
    short-circuits everything else.

    Args:
        value: Raw, un-trimmed field value
        form_values: Form snapshot (unused; accepted for a uniform detector signature)

    Returns:
        Set of generic detection tags
    """
    del form_values

    if not value or not value.strip():
        return {EMPTY_VALUE}

    detections: set[str] = set()

    if value[0] == " ":
        detections.add("leading_space")
    if value[-1] == " ":
        detections.add("trailing_space")
    if " " in value.strip():
        detections.add("middle_space")

    if _NON_ALPHANUMERIC.search(value):
        detections.add("non_alphanumeric")
    if _has_non_ascii(value):
        detections.add("non_ascii")
    if _has_non_printable(value):
        detections.add("non_printable")

    if _HTML_TAG.search(value):
        detections.add("contains_html")
    if _SCRIPT_TAG.search(value):
        detections.add("contains_xss")
    if _looks_like_sql_injection(value):
        detections.add("contains_sql_injection")

    return detections
