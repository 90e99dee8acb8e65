"""Data models for replaying recorded form submissions."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rxprobe.accomplishments.session import AccomplishmentSession, SubmissionResult
from rxprobe.core.types import FieldName
from rxprobe.detection.form import SubmissionContext


class FormSubmission(BaseModel):
    """One recorded submission of the prescription form.

    Field values are kept as raw strings; unquoted YAML numbers are turned
    back into text.
    """

    model_config = ConfigDict(populate_by_name=True)

    medication: str = ""
    date_of_birth: str = Field(default="", alias="dateOfBirth")
    weight: str = ""
    dosage: str = ""
    frequency: str = ""
    enter: bool = False

    @field_validator("medication", "date_of_birth", "weight", "dosage", "frequency", mode="before")
    @classmethod
    def coerce_to_text(cls, value):
        if value is None:
            return ""
        if isinstance(value, bool):
            return str(value).lower()
        return str(value)

    def form_values(self) -> dict[str, str]:
        """Raw values keyed by form field name."""
        return {
            FieldName.MEDICATION.value: self.medication,
            FieldName.DATE_OF_BIRTH.value: self.date_of_birth,
            FieldName.WEIGHT.value: self.weight,
            FieldName.DOSAGE.value: self.dosage,
            FieldName.FREQUENCY.value: self.frequency,
        }

    def context(self) -> SubmissionContext:
        """Enter-key submissions come from a focused text input."""
        return SubmissionContext(focused_text_input=self.enter, implicit_submission=self.enter)


class ReplayResult(BaseModel):
    """Outcome of replaying a batch of submissions."""

    session: AccomplishmentSession
    results: list[SubmissionResult] = Field(default_factory=list)

    @property
    def invalid_count(self) -> int:
        return sum(1 for result in self.results if not result.is_valid)
