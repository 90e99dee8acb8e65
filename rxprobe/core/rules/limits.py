"""Medication-aware numeric rule tables.

Every table is keyed by the Medication enum. A medication missing from a
table (placebo, or no recognized medication at all) falls back to the
generic limits of that field.
"""

from dataclasses import dataclass

from rxprobe.core.types import FieldName, Medication


@dataclass(frozen=True)
class RangeLimits:
    """Inclusive valid range of a numeric field."""

    min_value: float
    max_value: float


@dataclass(frozen=True)
class RangeScope:
    """The range a value is classified against, and whose tags it earns.

    Attributes:
        medication: Medication the tags are scoped to, None for generic tags
        limits: Inclusive valid range for this scope
    """

    medication: Medication | None
    limits: RangeLimits


@dataclass(frozen=True)
class AgeGate:
    """Minimum age a patient must reach before a medication is allowed."""

    years: int
    months: int = 0


GENERIC_LIMITS: dict[FieldName, RangeLimits] = {
    FieldName.WEIGHT: RangeLimits(5, 500),
    FieldName.DOSAGE: RangeLimits(200, 1000),
    FieldName.FREQUENCY: RangeLimits(1, 5),
}

MEDICATION_LIMITS: dict[FieldName, dict[Medication, RangeLimits]] = {
    FieldName.WEIGHT: {
        Medication.ASPIRIN: RangeLimits(40, 500),
        Medication.IBUPROFEN: RangeLimits(5, 500),
        Medication.PARACETAMOL: RangeLimits(5, 500),
        Medication.NAPROXEN: RangeLimits(40, 500),
    },
    FieldName.DOSAGE: {
        Medication.ASPIRIN: RangeLimits(325, 1000),
        Medication.IBUPROFEN: RangeLimits(200, 800),
        Medication.PARACETAMOL: RangeLimits(500, 1000),
        Medication.NAPROXEN: RangeLimits(220, 550),
    },
    FieldName.FREQUENCY: {
        Medication.ASPIRIN: RangeLimits(1, 4),
        Medication.IBUPROFEN: RangeLimits(1, 4),
        Medication.PARACETAMOL: RangeLimits(1, 4),
        Medication.NAPROXEN: RangeLimits(1, 3),
    },
}

# Maximum daily dose in mg per kg of body weight
TOTAL_DOSE_FACTORS: dict[Medication, int] = {
    Medication.IBUPROFEN: 40,
    Medication.PARACETAMOL: 75,
}

# Medications whose own maximum replaces the generic maximum of a field
GENERIC_MAX_EXEMPTIONS: dict[FieldName, frozenset[Medication]] = {
    FieldName.DOSAGE: frozenset({Medication.PARACETAMOL}),
}

AGE_GATES: dict[Medication, AgeGate] = {
    Medication.ASPIRIN: AgeGate(years=12),
    Medication.IBUPROFEN: AgeGate(years=0, months=6),
    Medication.PARACETAMOL: AgeGate(years=0, months=3),
    Medication.NAPROXEN: AgeGate(years=12),
}


def resolve_range_scope(field: FieldName, medication: Medication | None) -> RangeScope:
    """Pick the range a numeric field is classified against.

    Args:
        field: Numeric field (weight, dosage or frequency)
        medication: Currently selected medication, if recognized

    Returns:
        The medication's scope when it has limits for this field, else the generic scope
    """
    if medication is not None:
        limits = MEDICATION_LIMITS[field].get(medication)
        if limits is not None:
            return RangeScope(medication=medication, limits=limits)
    return RangeScope(medication=None, limits=GENERIC_LIMITS[field])
