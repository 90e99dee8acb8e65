"""Shared utility functions for RxProbe."""

import math
import os
import re
from collections.abc import Callable
from pathlib import Path
from re import Pattern
from typing import TextIO

from loguru import logger

_LEADING_FLOAT = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_LEADING_INFINITY = re.compile(r"^[+-]?Infinity")


def compile_wildcard_regex(pattern: str) -> Pattern:
    """Converts a simple wildcard pattern (* syntax) to a compiled regex object.

    e.g., 'aspirin_*' -> '^aspirin_.*$', '*_nominal' -> '^.*_nominal$'
    """
    parts = [re.escape(part) for part in pattern.split("*")]
    regex_str = ".*".join(parts)
    return re.compile(f"^{regex_str}$")


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def parse_leading_float(text: str | None) -> float:
    """Parse the longest numeric prefix of a string, the way form inputs are read.

    Leading whitespace is ignored and anything after the numeric prefix is
    discarded, so ``"1000.5,0"`` reads as ``1000.5`` and ``"2.5.5"`` as ``2.5``.

    Args:
        text: Raw string to parse

    Returns:
        The parsed value, or NaN when the string has no numeric prefix
    """
    if not text:
        return math.nan

    stripped = text.lstrip()
    match = _LEADING_FLOAT.match(stripped)
    if match:
        return float(match.group(0))

    match = _LEADING_INFINITY.match(stripped)
    if match:
        return -math.inf if match.group(0).startswith("-") else math.inf

    return math.nan


def parse_positive_float(text: str | None) -> float | None:
    """Parse a related field's value for cross-field formulas.

    Args:
        text: Raw value of the related field

    Returns:
        The parsed value if it is a number greater than zero, otherwise None
    """
    value = parse_leading_float(text)
    if math.isnan(value) or value <= 0:
        return None
    return value


def rolling_hash(text: str) -> int:
    """32-bit polynomial string hash (``hash * 31 + code`` per character).

    Args:
        text: String to hash

    Returns:
        Hash as an unsigned 32-bit integer
    """
    value = 0
    for char in text:
        value = (value * 31 + ord(char)) & 0xFFFFFFFF
    return value


def to_signed_32(value: int) -> int:
    """Reinterpret an unsigned 32-bit integer as signed."""
    return value - 0x100000000 if value & 0x80000000 else value


def write_file_safely(
    filepath: str | Path,
    write_func: Callable[[TextIO], None],
    error_context: str = "writing file",
) -> None:
    """Open a file for writing and hand it to a writer callback.

    Parent directories are created as needed.

    Args:
        filepath: Destination path
        write_func: Callback that writes the content
        error_context: Description of the operation for the error log

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(filepath)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            write_func(f)
    except OSError as e:
        logger.error(f"Error {error_context} to {path}: {e}")
        raise
