"""Tamper-evidence checksums for persisted session data.

The checksum only catches casual edits of the session file; it offers no
cryptographic protection.
"""

import json
from typing import Any

from rxprobe.utils.constants import Constants
from rxprobe.utils.helpers import rolling_hash, to_signed_32


def serialize_for_checksum(data: Any) -> str:
    """Canonical compact JSON form of the data (sorted keys, no spaces)."""
    return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def generate_checksum(data: Any) -> str:
    """Checksum of JSON-serializable data salted with the storage secret.

    Args:
        data: JSON-serializable value

    Returns:
        Absolute value of the signed 32-bit hash, in lowercase hex without padding
    """
    combined = serialize_for_checksum(data) + Constants.CHECKSUM_SECRET
    return format(abs(to_signed_32(rolling_hash(combined))), "x")


def verify_checksum(data: Any, checksum: str) -> bool:
    return generate_checksum(data) == checksum


def create_checksum_package(data: Any) -> dict[str, Any]:
    """Wrap data together with its checksum."""
    return {"data": data, "checksum": generate_checksum(data)}


def extract_verified_data(package: Any) -> Any | None:
    """Unwrap a checksum package.

    Args:
        package: Value read back from storage

    Returns:
        The wrapped data, or None if the package is malformed or its checksum
        does not match
    """
    if not isinstance(package, dict) or "data" not in package or "checksum" not in package:
        return None
    if verify_checksum(package["data"], package["checksum"]):
        return package["data"]
    return None
