"""Replaying recorded submissions through a session."""

from rxprobe.processing.data_models import FormSubmission, ReplayResult
from rxprobe.processing.loading import load_submissions
from rxprobe.processing.pipeline import check_access, replay_submissions, run_pipeline

__all__ = [
    "FormSubmission",
    "ReplayResult",
    "check_access",
    "load_submissions",
    "replay_submissions",
    "run_pipeline",
]
