"""Accomplishment reports."""

from rxprobe.reports.submission import (
    build_report,
    format_accomplishments_for_submission,
    write_yaml_report,
)

__all__ = ["build_report", "format_accomplishments_for_submission", "write_yaml_report"]
