"""Utility functions for RxProbe."""

from rxprobe.utils.constants import Constants
from rxprobe.utils.debug import DebugTagMatcher, is_debug_tag, log_debug_tag, log_if_debug_tags
from rxprobe.utils.helpers import (
    compile_wildcard_regex,
    expand_file_path,
    parse_leading_float,
    parse_positive_float,
    rolling_hash,
    to_signed_32,
    write_file_safely,
)
from rxprobe.utils.logging import setup_logger

__all__ = [
    "Constants",
    "DebugTagMatcher",
    "is_debug_tag",
    "log_debug_tag",
    "log_if_debug_tags",
    "compile_wildcard_regex",
    "expand_file_path",
    "parse_leading_float",
    "parse_positive_float",
    "rolling_hash",
    "to_signed_32",
    "write_file_safely",
    "setup_logger",
]
