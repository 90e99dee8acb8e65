"""Unit tests for AccomplishmentSession."""

from datetime import date

from rxprobe.accomplishments import AccomplishmentSession
from rxprobe.core.types import FieldName
from rxprobe.detection import SubmissionContext

TODAY = date(2026, 10, 19)

ASPIRIN_FORM = {
    "medication": "aspirin",
    "dateOfBirth": "2014-10-19",
    "weight": "40",
    "dosage": "325",
    "frequency": "4",
}


class TestSubmit:
    """Test AccomplishmentSession.submit."""

    def test_valid_submission(self) -> None:
        """A valid aspirin prescription has no errors and earns scoped badges."""
        session = AccomplishmentSession()
        result = session.submit(ASPIRIN_FORM, today=TODAY)

        assert result.is_valid
        assert {"aspirin_boundary_min", "aspirin_nominal"} <= session.accomplishments[
            FieldName.WEIGHT
        ]
        assert result.new_badges[FieldName.WEIGHT] == session.accomplishments[FieldName.WEIGHT]

    def test_all_nominal_form_earns_form_badges(self) -> None:
        """Every field nominal earns the nominal form badges."""
        session = AccomplishmentSession()
        session.submit(ASPIRIN_FORM, today=TODAY)
        assert {"nominal_form", "nominal_form_aspirin"} <= session.form_accomplishments

    def test_nominal_form_across_submissions(self) -> None:
        """Nominal values collected over several submissions add up to a nominal form."""
        session = AccomplishmentSession()
        placebo = {
            "medication": "placebo",
            "dateOfBirth": "1990-01-01",
            "weight": "70",
            "dosage": "500",
            "frequency": "2",
        }
        session.submit({**placebo, "dosage": "abc"}, today=TODAY)
        assert "nominal_form" not in session.form_accomplishments

        result = session.submit({**placebo, "weight": "abc"}, today=TODAY)
        assert {"nominal_form", "nominal_form_placebo"} <= result.new_form_badges

    def test_enter_submission(self) -> None:
        """Enter-key submissions earn enter_submit."""
        session = AccomplishmentSession()
        context = SubmissionContext(focused_text_input=True, implicit_submission=True)
        result = session.submit({"medication": ""}, context=context, today=TODAY)
        assert "enter_submit" in result.new_form_badges

    def test_invalid_submission_reports_errors(self) -> None:
        """Errors are reported per field and badges are still earned."""
        session = AccomplishmentSession()
        result = session.submit({"medication": ""}, today=TODAY)

        assert result.errors[FieldName.MEDICATION] == ["Medication is required"]
        assert "empty_value" in session.accomplishments[FieldName.MEDICATION]

    def test_repeat_submission_earns_nothing_new(self) -> None:
        """Badges are only new the first time they are earned."""
        session = AccomplishmentSession()
        session.submit(ASPIRIN_FORM, today=TODAY)
        result = session.submit(ASPIRIN_FORM, today=TODAY)

        assert result.new_badges == {}
        assert result.new_form_badges == frozenset()

    def test_previous_snapshot(self) -> None:
        """The previous snapshot holds the state before the latest merge."""
        session = AccomplishmentSession()
        session.submit({"weight": "70"}, today=TODAY)
        first = session.accomplishments[FieldName.WEIGHT]
        session.submit({"weight": "-5"}, today=TODAY)

        assert session.previous_accomplishments[FieldName.WEIGHT] == first
        assert session.accomplishments[FieldName.WEIGHT] > first


class TestStorageFlags:
    """Test the tampering and concurrent session flags."""

    def test_flags_become_form_badges(self) -> None:
        """Raised flags become badges on the next submission."""
        session = AccomplishmentSession()
        session.flag_storage_tampering()
        session.flag_concurrent_session()
        result = session.submit({}, today=TODAY)

        assert {"storage_tampering", "concurrent_session"} <= result.form_detections

    def test_flags_are_consumed(self) -> None:
        """A flag produces its badge once and is then cleared."""
        session = AccomplishmentSession()
        session.flag_storage_tampering()
        session.submit({}, today=TODAY)

        assert not session.storage_tampered
        assert "storage_tampering" not in session.submit({}, today=TODAY).form_detections

    def test_badges_outlive_flags(self) -> None:
        """Form badges stay earned after their flag is cleared."""
        session = AccomplishmentSession()
        session.flag_concurrent_session()
        session.submit({}, today=TODAY)
        session.submit({}, today=TODAY)
        assert "concurrent_session" in session.form_accomplishments


class TestReset:
    """Test AccomplishmentSession.reset."""

    def test_reset_clears_everything(self) -> None:
        """Reset empties all collections and flags."""
        session = AccomplishmentSession()
        session.submit(ASPIRIN_FORM, today=TODAY)
        session.flag_storage_tampering()
        session.reset()

        assert session.badge_count == 0
        assert session.previous_accomplishments == {}
        assert not session.storage_tampered


class TestDisplayOrder:
    """Test the sorted badge accessors."""

    def test_sorted_badges(self) -> None:
        """Badges come back in display order."""
        session = AccomplishmentSession()
        session.submit({"weight": "-5.5"}, today=TODAY)
        badges = session.sorted_badges(FieldName.WEIGHT)
        assert badges.index("negative_value") < badges.index("decimal_value")

    def test_sorted_form_badges(self) -> None:
        """Form badges come back in display order."""
        session = AccomplishmentSession()
        session.flag_storage_tampering()
        session.flag_concurrent_session()
        context = SubmissionContext(focused_text_input=True, implicit_submission=True)
        session.submit({}, context=context, today=TODAY)
        assert session.sorted_form_badges() == [
            "enter_submit",
            "concurrent_session",
            "storage_tampering",
        ]
