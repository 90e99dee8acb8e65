"""Session persistence with tamper evidence."""

from rxprobe.storage.checksum import (
    create_checksum_package,
    extract_verified_data,
    generate_checksum,
    verify_checksum,
)
from rxprobe.storage.session_store import SessionStore, session_to_storage

__all__ = [
    "SessionStore",
    "create_checksum_package",
    "extract_verified_data",
    "generate_checksum",
    "session_to_storage",
    "verify_checksum",
]
