"""Access window gating for candidate sessions."""

from rxprobe.access.token import (
    AccessGrant,
    AccessStatus,
    AccessTokenError,
    AccessWindow,
    decode_access_token,
    encode_access_token,
    generate_access_link,
    generate_temporary_access_url,
    validate_access_token,
    validate_access_window,
)

__all__ = [
    "AccessGrant",
    "AccessStatus",
    "AccessTokenError",
    "AccessWindow",
    "decode_access_token",
    "encode_access_token",
    "generate_access_link",
    "generate_temporary_access_url",
    "validate_access_token",
    "validate_access_window",
]
