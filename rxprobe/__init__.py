"""RxProbe - Testing-pattern detection for a prescription form.

Validate prescription form submissions and award badges for the boundary,
format and injection cases a tester exercised.
"""

from .accomplishments import (
    AccomplishmentSession,
    aggregate,
    describe_tag,
    icon_for_tag,
    sort_for_display,
)
from .core import Config, FieldName, Medication, load_config
from .detection import SubmissionContext, detect, detect_all, detect_form
from .processing import run_pipeline
from .validation import validate, validate_all

__version__ = "0.1.0"
__all__ = [
    "AccomplishmentSession",
    "Config",
    "FieldName",
    "Medication",
    "SubmissionContext",
    "aggregate",
    "describe_tag",
    "detect",
    "detect_all",
    "detect_form",
    "icon_for_tag",
    "load_config",
    "run_pipeline",
    "sort_for_display",
    "validate",
    "validate_all",
]
