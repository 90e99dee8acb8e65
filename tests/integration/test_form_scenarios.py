"""End-to-end form submissions through a session."""

from datetime import date

import pytest

from rxprobe.accomplishments import AccomplishmentSession
from rxprobe.core.rules import messages
from rxprobe.core.types import FieldName, Medication
from rxprobe.detection import detect

TODAY = date(2026, 10, 19)

INJECTION_VALUE = " ;<script> @ SELECT "


def test_aspirin_prescription_at_every_lower_limit():
    """A twelve-year-old aspirin patient on the edge of every aspirin limit."""
    session = AccomplishmentSession()
    result = session.submit(
        {
            "medication": "aspirin",
            "dateOfBirth": "2014-10-19",
            "weight": "40",
            "dosage": "325",
            "frequency": "4",
        },
        today=TODAY,
    )

    assert result.errors == {}

    expected = {
        FieldName.DATE_OF_BIRTH: {"aspirin_boundary_max", "aspirin_nominal"},
        FieldName.WEIGHT: {"aspirin_boundary_min", "aspirin_nominal"},
        FieldName.DOSAGE: {"aspirin_boundary_min", "aspirin_nominal"},
        FieldName.FREQUENCY: {"aspirin_boundary_max", "aspirin_nominal"},
    }
    for field, tags in expected.items():
        assert tags <= result.detections[field], f"{field.value}: {result.detections[field]}"


def test_ibuprofen_total_dose_above_maximum():
    """A 10 kg patient on 4 x 500 mg of ibuprofen exceeds the daily maximum."""
    session = AccomplishmentSession()
    result = session.submit(
        {"medication": "ibuprofen", "weight": "10", "dosage": "500", "frequency": "4"},
        today=TODAY,
    )

    assert messages.total_dose(Medication.IBUPROFEN, 40) in result.errors[FieldName.DOSAGE]
    assert "ibuprofen_total_above_max" in result.detections[FieldName.DOSAGE]
    assert "ibuprofen_nominal" not in result.detections[FieldName.DOSAGE]


def test_empty_medication():
    """An empty medication is only an empty value and a required field."""
    session = AccomplishmentSession()
    result = session.submit({"medication": ""}, today=TODAY)

    assert result.detections[FieldName.MEDICATION] == frozenset({"empty_value"})
    assert result.errors[FieldName.MEDICATION] == [messages.required(FieldName.MEDICATION)]


def test_february_thirtieth_in_leap_year():
    """2000-02-30 looks like a date but overflows a leap-year February."""
    session = AccomplishmentSession()
    result = session.submit({"dateOfBirth": "2000-02-30"}, today=TODAY)

    assert {"invalid_february_day", "invalid_leap_year_february"} <= result.detections[
        FieldName.DATE_OF_BIRTH
    ]
    assert messages.february_overflow(29, True) in result.errors[FieldName.DATE_OF_BIRTH]


@pytest.mark.parametrize("field", list(FieldName))
def test_injection_payload_on_every_field(field):
    """Spacing, symbol and injection patterns are detected on any field."""
    detections = detect(field, INJECTION_VALUE, today=TODAY)
    assert {
        "leading_space",
        "trailing_space",
        "middle_space",
        "non_alphanumeric",
        "contains_html",
        "contains_xss",
        "contains_sql_injection",
    } <= detections
