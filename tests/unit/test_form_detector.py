"""Unit tests for form-level detection."""

from rxprobe.core.types import FieldName
from rxprobe.detection.form import SubmissionContext, detect_form

ASPIRIN_FORM = {"medication": "aspirin"}


def _all_nominal(tag: str = "aspirin_nominal") -> dict[FieldName, set[str]]:
    detections = {field: {tag} for field in FieldName}
    detections[FieldName.MEDICATION] = {"nominal_value"}
    return detections


class TestEnterSubmit:
    """Test Enter-key submission detection."""

    def test_enter_from_text_input(self) -> None:
        """Implicit submission from a focused text input is enter_submit."""
        context = SubmissionContext(focused_text_input=True, implicit_submission=True)
        assert detect_form(context, {}) == {"enter_submit"}

    def test_button_click_is_not_enter(self) -> None:
        """Clicking the submit button is not an Enter submission."""
        context = SubmissionContext(focused_text_input=False, implicit_submission=True)
        assert detect_form(context, {}) == set()


class TestNominalForm:
    """Test nominal form detection."""

    def test_all_fields_nominal(self) -> None:
        """Every field nominal earns the form and medication tags."""
        detections = detect_form(SubmissionContext(), _all_nominal(), ASPIRIN_FORM)
        assert detections == {"nominal_form", "nominal_form_aspirin"}

    def test_generic_nominal_counts(self) -> None:
        """Generic nominal tags satisfy the check too."""
        detections = detect_form(SubmissionContext(), _all_nominal("nominal_value"), ASPIRIN_FORM)
        assert "nominal_form" in detections

    def test_other_tags_are_ignored(self) -> None:
        """Extra tags next to the nominal tag do not matter."""
        field_detections = _all_nominal()
        field_detections[FieldName.WEIGHT] |= {"aspirin_boundary_min", "decimal_value"}
        assert "nominal_form" in detect_form(SubmissionContext(), field_detections, ASPIRIN_FORM)

    def test_missing_field_blocks_nominal_form(self) -> None:
        """All five fields must have detections."""
        field_detections = _all_nominal()
        del field_detections[FieldName.FREQUENCY]
        assert detect_form(SubmissionContext(), field_detections, ASPIRIN_FORM) == set()

    def test_non_nominal_field_blocks_nominal_form(self) -> None:
        """A field without a nominal tag blocks the form tag."""
        field_detections = _all_nominal()
        field_detections[FieldName.DOSAGE] = {"aspirin_above_max"}
        assert detect_form(SubmissionContext(), field_detections, ASPIRIN_FORM) == set()

    def test_other_medication_nominal_does_not_count(self) -> None:
        """Nominal tags of another medication do not satisfy the check."""
        detections = detect_form(SubmissionContext(), _all_nominal("ibuprofen_nominal"), ASPIRIN_FORM)
        assert detections == set()
