"""Type definitions for RxProbe."""

from collections.abc import Mapping
from enum import Enum


class FieldName(Enum):
    """Fields of the prescription form."""

    MEDICATION = "medication"
    DATE_OF_BIRTH = "dateOfBirth"
    WEIGHT = "weight"
    DOSAGE = "dosage"
    FREQUENCY = "frequency"


class Medication(Enum):
    """Medications accepted by the prescription form.

    Declaration order is the display precedence of medication-scoped badges.
    """

    PLACEBO = "placebo"
    ASPIRIN = "aspirin"
    IBUPROFEN = "ibuprofen"
    PARACETAMOL = "paracetamol"
    NAPROXEN = "naproxen"

    @property
    def label(self) -> str:
        """Capitalized name for messages, e.g. 'Aspirin'."""
        return self.value.capitalize()


# Raw, un-trimmed form values keyed by FieldName.value
FormValues = Mapping[str, str]

# Detection tags are plain strings from a closed vocabulary
DetectionTag = str

ACCEPTED_MEDICATIONS: frozenset[str] = frozenset(med.value for med in Medication)


def field_value(form_values: FormValues | None, field: FieldName) -> str:
    """Return the raw value of a field, or an empty string when missing."""
    if not form_values:
        return ""
    return form_values.get(field.value) or ""


def parse_medication(raw: str | None) -> Medication | None:
    """Resolve a raw medication string to a Medication.

    Matching is case-insensitive and ignores surrounding whitespace.

    Args:
        raw: Raw medication field value

    Returns:
        The matching Medication, or None for empty or unrecognized input
    """
    if not raw:
        return None
    normalized = raw.strip().lower()
    try:
        return Medication(normalized)
    except ValueError:
        return None


def selected_medication(form_values: FormValues | None) -> Medication | None:
    """Return the medication currently selected in a form snapshot."""
    return parse_medication(field_value(form_values, FieldName.MEDICATION))
