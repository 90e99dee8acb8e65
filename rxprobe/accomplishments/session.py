"""Accomplishment state of one testing session."""

from datetime import date

from loguru import logger
from pydantic import BaseModel, Field

from rxprobe.accomplishments.aggregation import aggregate, newly_earned
from rxprobe.accomplishments.sorting import sort_for_display
from rxprobe.core.rules.tags import CONCURRENT_SESSION, STORAGE_TAMPERING
from rxprobe.core.types import FieldName, FormValues
from rxprobe.detection import detect_all, detect_form
from rxprobe.detection.form import SubmissionContext
from rxprobe.utils.debug import DebugTagMatcher, log_if_debug_tags
from rxprobe.validation import validate_all


class SubmissionResult(BaseModel):
    """Outcome of a single form submission.

    Attributes:
        errors: Validation messages per field (valid fields are omitted)
        detections: Tags detected in this submission, per field
        form_detections: Form-level tags detected in this submission
        new_badges: Tags earned for the first time, per field
        new_form_badges: Form-level tags earned for the first time
    """

    errors: dict[FieldName, list[str]] = Field(default_factory=dict)
    detections: dict[FieldName, frozenset[str]] = Field(default_factory=dict)
    form_detections: frozenset[str] = frozenset()
    new_badges: dict[FieldName, frozenset[str]] = Field(default_factory=dict)
    new_form_badges: frozenset[str] = frozenset()

    @property
    def is_valid(self) -> bool:
        return not self.errors


class AccomplishmentSession(BaseModel):
    """Accumulated badges of a session plus the externally reported flags.

    The three accomplishment collections change only through ``submit`` and
    ``reset``. Storage collaborators raise the two flags; the next submission
    turns them into form-level badges and clears them.
    """

    accomplishments: dict[FieldName, frozenset[str]] = Field(default_factory=dict)
    previous_accomplishments: dict[FieldName, frozenset[str]] = Field(default_factory=dict)
    form_accomplishments: frozenset[str] = frozenset()
    storage_tampered: bool = False
    concurrent_session: bool = False

    def flag_storage_tampering(self) -> None:
        """Record that persisted state failed its integrity check."""
        self.storage_tampered = True

    def flag_concurrent_session(self) -> None:
        """Record that another session wrote the same state."""
        self.concurrent_session = True

    def submit(
        self,
        form_values: FormValues,
        context: SubmissionContext | None = None,
        today: date | None = None,
        debug_tag_matcher: DebugTagMatcher | None = None,
    ) -> SubmissionResult:
        """Validate and detect a form submission, then merge its badges.

        Everything is computed before any attribute is replaced, so the
        session is never observed half-updated.

        Args:
            form_values: Raw field values keyed by field name
            context: How the form was submitted (defaults to a button click)
            today: Reference day for date of birth checks (defaults to today)
            debug_tag_matcher: Optional matcher for tracing individual tags

        Returns:
            SubmissionResult with errors, detections and newly earned badges
        """
        context = context or SubmissionContext()

        errors = validate_all(form_values, today)
        detections = {
            field: frozenset(tags) for field, tags in detect_all(form_values, today).items()
        }
        for field, tags in detections.items():
            log_if_debug_tags(set(tags), "detected", debug_tag_matcher, field.value)

        updated, previous = aggregate(self.accomplishments, detections)

        form_detections = detect_form(context, updated, form_values)
        if self.storage_tampered:
            form_detections.add(STORAGE_TAMPERING)
        if self.concurrent_session:
            form_detections.add(CONCURRENT_SESSION)
        log_if_debug_tags(form_detections, "detected", debug_tag_matcher, "form")

        form_accomplishments = self.form_accomplishments | form_detections
        result = SubmissionResult(
            errors=errors,
            detections=detections,
            form_detections=frozenset(form_detections),
            new_badges=newly_earned(updated, previous),
            new_form_badges=form_accomplishments - self.form_accomplishments,
        )

        self.previous_accomplishments = previous
        self.accomplishments = updated
        self.form_accomplishments = form_accomplishments
        self.storage_tampered = False
        self.concurrent_session = False

        for field, tags in result.new_badges.items():
            log_if_debug_tags(set(tags), "newly earned", debug_tag_matcher, field.value)
        logger.debug(
            f"Submission merged: {sum(len(tags) for tags in result.new_badges.values())} new field "
            f"badges, {len(result.new_form_badges)} new form badges"
        )
        return result

    def reset(self) -> None:
        """Clear all accomplishments and flags."""
        self.accomplishments = {}
        self.previous_accomplishments = {}
        self.form_accomplishments = frozenset()
        self.storage_tampered = False
        self.concurrent_session = False
        logger.debug("Session reset")

    def sorted_badges(self, field: FieldName) -> list[str]:
        """Accomplishments of one field in display order."""
        return sort_for_display(self.accomplishments.get(field, frozenset()))

    def sorted_form_badges(self) -> list[str]:
        """Form-level accomplishments in display order."""
        return sort_for_display(self.form_accomplishments)

    @property
    def badge_count(self) -> int:
        return sum(len(tags) for tags in self.accomplishments.values()) + len(
            self.form_accomplishments
        )
