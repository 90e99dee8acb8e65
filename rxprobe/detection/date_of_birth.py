"""Date of birth field detection.

A birth date maps onto an age range inverted in time: the oldest valid age
is the *earliest* date, so it earns ``boundary_min``, while the youngest age
a medication allows is the *latest* valid date and earns ``boundary_max``.
Patients too young for a medication are ``above_max``; patients older than
the minimum age are ``below_min``.
"""

from datetime import date

from loguru import logger

from rxprobe.core.dates import (
    FEBRUARY,
    THIRTY_DAY_MONTHS,
    Age,
    calculate_age,
    days_in_month,
    is_leap_year,
    parse_date,
)
from rxprobe.core.rules.limits import AGE_GATES
from rxprobe.core.rules.tags import NOMINAL_VALUE, RangePattern, scoped_tag
from rxprobe.core.types import FormValues, Medication, selected_medication
from rxprobe.detection.length import detect_length_boundaries
from rxprobe.utils.constants import Constants

# Medications whose scoped tags fire for a birth date in the future
_FUTURE_DATE_MEDICATIONS = frozenset({Medication.ASPIRIN, Medication.IBUPROFEN})


def _detect_calendar_errors(year: int, month: int, day: int) -> set[str]:
    """Month range, day range and day-for-month overflow."""
    detections: set[str] = set()

    if not 1 <= month <= 12:
        detections.add("invalid_month")
    if not 1 <= day <= 31:
        detections.add("invalid_day")

    if 1 <= month <= 12 and day > days_in_month(month, year):
        if month in THIRTY_DAY_MONTHS:
            detections.add("invalid_day_for_30day_month")
        if month == FEBRUARY:
            detections.add("invalid_february_day")
            if is_leap_year(year):
                detections.add("invalid_leap_year_february")

    return detections


def _detect_age_gate(age: Age, medication: Medication) -> set[str]:
    """Classify an age against a medication's minimum age."""
    gate = AGE_GATES[medication]

    if age.is_younger_than(gate.years, gate.months):
        return {scoped_tag(RangePattern.ABOVE_MAX, medication)}
    if age.is_exactly(gate.years, gate.months):
        return {
            scoped_tag(RangePattern.BOUNDARY_MAX, medication),
            scoped_tag(RangePattern.NOMINAL, medication),
        }
    # Year-based gates distinguish "in the gate year" from "older than the gate"
    if gate.years and age.years > gate.years:
        return {scoped_tag(RangePattern.BELOW_MIN, medication)}
    return {scoped_tag(RangePattern.NOMINAL, medication)}


def _detect_age_patterns(age: Age, medication: Medication | None) -> set[str]:
    """Classify a computed age, medication-scoped where the medication has a rule."""
    gated = medication if medication in AGE_GATES else None

    if age.is_unrealistic:
        return {scoped_tag(RangePattern.BELOW_MIN, gated)}

    if age.is_oldest_realistic:
        return {
            scoped_tag(RangePattern.NOMINAL, gated),
            scoped_tag(RangePattern.BOUNDARY_MIN, gated),
        }

    if age.is_newborn:
        newborn_scope = medication if medication is Medication.IBUPROFEN else None
        return {
            scoped_tag(RangePattern.BOUNDARY_MAX, newborn_scope),
            scoped_tag(RangePattern.NOMINAL, newborn_scope),
        }

    if gated is not None:
        return _detect_age_gate(age, gated)

    return {NOMINAL_VALUE}


def detect_date_of_birth(
    value: str | None,
    form_values: FormValues | None = None,
    today: date | None = None,
) -> set[str]:
    """Detect date of birth testing patterns.

    Args:
        value: Raw date of birth value (YYYY-MM-DD)
        form_values: Form snapshot, read for the selected medication
        today: Reference day for future-date and age checks (defaults to today)

    Returns:
        Set of detection tags, empty for an empty value
    """
    if not value or not value.strip():
        return set()

    trimmed = value.strip()
    detections = detect_length_boundaries(len(trimmed), Constants.DATE_OF_BIRTH_MAX_LENGTH)

    parts = parse_date(trimmed)
    if parts is None:
        detections.add("invalid_format")
        return detections

    detections |= _detect_calendar_errors(parts.year, parts.month, parts.day)

    today = today or date.today()
    medication = selected_medication(form_values)

    if parts.is_after(today):
        if medication in _FUTURE_DATE_MEDICATIONS:
            detections.add(scoped_tag(RangePattern.ABOVE_MAX, medication))
        return detections

    age = calculate_age(parts, today)
    if age is None:
        return detections

    logger.debug(f"Date of birth {trimmed} -> age {age.years}y {age.months}m {age.days}d")
    detections |= _detect_age_patterns(age, medication)
    return detections
