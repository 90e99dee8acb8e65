"""Unit tests for the numeric field validators."""

from rxprobe.core.types import FieldName
from rxprobe.validation import validate
from rxprobe.validation.dosage import validate_dosage
from rxprobe.validation.frequency import validate_frequency
from rxprobe.validation.weight import validate_weight


def _form(medication: str = "", weight: str = "", frequency: str = "") -> dict[str, str]:
    return {"medication": medication, "weight": weight, "frequency": frequency}


class TestValidateWeight:
    """Test validate_weight behavior."""

    def test_empty_is_required(self) -> None:
        """An empty weight only reports that it is required."""
        assert validate_weight("  ", _form()) == ["Weight is required"]

    def test_not_a_number(self) -> None:
        """A non-numeric weight is not a valid number."""
        assert validate_weight("abc", _form()) == ["Weight must be a valid number"]

    def test_fullwidth_digits_are_not_a_number(self) -> None:
        """Only ASCII digits count as numeric input."""
        assert validate_weight("７０", _form()) == ["Weight must be a valid number"]

    def test_too_long_short_circuits(self) -> None:
        """A too-long value skips range checks."""
        assert validate_weight("12345678901", _form()) == [
            "Weight must not exceed 10 characters"
        ]

    def test_valid_weight(self) -> None:
        """A weight in range is valid."""
        assert validate_weight("70", _form()) == []

    def test_below_generic_minimum(self) -> None:
        """Below 5 kg violates the generic minimum."""
        assert validate_weight("4", _form()) == ["Weight must be at least 5 kg"]

    def test_below_aspirin_minimum(self) -> None:
        """Aspirin adds its own minimum."""
        assert validate_weight("30", _form("aspirin")) == ["Aspirin weight must be at least 40 kg"]

    def test_generic_and_medication_errors_accumulate(self) -> None:
        """A value outside both ranges gets both messages."""
        assert validate_weight("600", _form("aspirin")) == [
            "Weight must not exceed 500 kg",
            "Aspirin weight must not exceed 500 kg",
        ]


class TestValidateDosage:
    """Test validate_dosage behavior."""

    def test_naproxen_maximum(self) -> None:
        """Naproxen doses above 550 mg are rejected."""
        assert validate_dosage("600", _form("naproxen")) == [
            "Naproxen dosage must not exceed 550 mg"
        ]

    def test_paracetamol_replaces_generic_maximum(self) -> None:
        """Paracetamol doses over 1000 mg report only the paracetamol maximum."""
        assert validate_dosage("1200", _form("paracetamol")) == [
            "Paracetamol dosage must not exceed 1000 mg"
        ]

    def test_aspirin_keeps_generic_maximum(self) -> None:
        """Other medications still report the generic maximum as well."""
        assert validate_dosage("1200", _form("aspirin")) == [
            "Dosage must not exceed 1000 mg",
            "Aspirin dosage must not exceed 1000 mg",
        ]

    def test_total_dose_exceeded(self) -> None:
        """The ibuprofen daily maximum is weight times 40."""
        assert validate_dosage("500", _form("ibuprofen", weight="10", frequency="4")) == [
            "Ibuprofen total dose must satisfy: dosage Ã frequency < weight Ã 40"
        ]

    def test_total_dose_at_maximum_is_rejected(self) -> None:
        """Reaching the daily maximum exactly is already an error."""
        errors = validate_dosage("500", _form("ibuprofen", weight="50", frequency="4"))
        assert errors == ["Ibuprofen total dose must satisfy: dosage Ã frequency < weight Ã 40"]

    def test_total_dose_below_maximum(self) -> None:
        """A daily total under the maximum is valid."""
        assert validate_dosage("500", _form("ibuprofen", weight="70", frequency="4")) == []

    def test_missing_frequency_skips_formula(self) -> None:
        """The formula is skipped until every input is known."""
        assert validate_dosage("500", _form("paracetamol", weight="10")) == []


class TestValidateFrequency:
    """Test validate_frequency behavior."""

    def test_decimal_is_not_whole(self) -> None:
        """Fractional frequencies are rejected before range checks."""
        assert validate_frequency("2.5", _form()) == ["Frequency must be a whole number"]

    def test_above_generic_maximum(self) -> None:
        """More than five doses a day is rejected."""
        assert validate_frequency("6", _form()) == ["Frequency must not exceed 5"]

    def test_below_generic_minimum(self) -> None:
        """Zero doses a day is rejected."""
        assert validate_frequency("0", _form()) == ["Frequency must be at least 1"]

    def test_naproxen_maximum(self) -> None:
        """Naproxen allows at most three doses a day."""
        assert validate_frequency("4", _form("naproxen")) == ["Naproxen frequency must not exceed 3"]


class TestValidateDispatch:
    """Test the field dispatching validate function."""

    def test_dispatches_by_field(self) -> None:
        """validate routes to the field's validator."""
        assert validate(FieldName.WEIGHT, "4") == ["Weight must be at least 5 kg"]

    def test_validation_is_idempotent(self) -> None:
        """Validating twice gives the same result."""
        form = _form("ibuprofen", weight="10", frequency="4")
        assert validate(FieldName.DOSAGE, "500", form) == validate(FieldName.DOSAGE, "500", form)
