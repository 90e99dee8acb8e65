"""Core domain types, rule tables and configuration for RxProbe."""

from rxprobe.core.config import Config, load_config
from rxprobe.core.types import (
    ACCEPTED_MEDICATIONS,
    DetectionTag,
    FieldName,
    FormValues,
    Medication,
    field_value,
    parse_medication,
    selected_medication,
)

__all__ = [
    "ACCEPTED_MEDICATIONS",
    "Config",
    "DetectionTag",
    "FieldName",
    "FormValues",
    "Medication",
    "field_value",
    "load_config",
    "parse_medication",
    "selected_medication",
]
