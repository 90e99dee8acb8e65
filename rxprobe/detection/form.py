"""Form-level detection over the per-field results of a submission."""

from collections.abc import Mapping

from pydantic import BaseModel

from rxprobe.core.rules.tags import ENTER_SUBMIT, NOMINAL_FORM, nominal_form_tag, nominal_tag
from rxprobe.core.types import FieldName, FormValues, selected_medication


class SubmissionContext(BaseModel):
    """How the form was submitted.

    Attributes:
        focused_text_input: A text input had focus when the form was submitted
        implicit_submission: The browser reported an implicit (Enter key) submission
    """

    focused_text_input: bool = False
    implicit_submission: bool = False

    @property
    def via_enter_key(self) -> bool:
        return self.focused_text_input and self.implicit_submission


def _field_is_nominal(tags: set[str] | frozenset[str], accepted: frozenset[str]) -> bool:
    return bool(tags & accepted)


def detect_form(
    context: SubmissionContext,
    field_detections: Mapping[FieldName, set[str]],
    form_values: FormValues | None = None,
) -> set[str]:
    """Detect form-level patterns.

    A form is nominal when every one of the five fields has detections and
    each carries a nominal tag (generic or scoped to the selected
    medication); other tags on the same field are ignored. The session passes
    its accumulated per-field sets, so nominal values collected over several
    submissions count together.

    Args:
        context: How the form was submitted
        field_detections: Accumulated detections per field
        form_values: Form snapshot, read for the selected medication

    Returns:
        Set of form-level tags
    """
    detections: set[str] = set()

    if context.via_enter_key:
        detections.add(ENTER_SUBMIT)

    medication = selected_medication(form_values)
    accepted = frozenset({nominal_tag(None), nominal_tag(medication)})

    all_fields_detected = all(field_detections.get(field) for field in FieldName)
    if all_fields_detected and all(
        _field_is_nominal(field_detections[field], accepted) for field in FieldName
    ):
        detections.add(NOMINAL_FORM)
        if medication is not None:
            detections.add(nominal_form_tag(medication))

    return detections
