"""Candidate access tokens and the time window they grant."""

import base64
import math
import re
from datetime import datetime, timedelta
from enum import Enum
from urllib.parse import urlencode

from loguru import logger
from pydantic import BaseModel

from rxprobe.utils.constants import Constants
from rxprobe.utils.helpers import rolling_hash

_DURATION_PATTERN = re.compile(r"^(\d+)h$", re.ASCII)


class AccessTokenError(ValueError):
    """Raised when an access token cannot be built or decoded."""


class AccessGrant(BaseModel):
    """Parameters carried by an access token.

    Attributes:
        email: Candidate email
        date: Start day, YYYY-MM-DD
        time: Start time, HH:MM
        duration: Window length such as ``3h``
    """

    email: str
    date: str
    time: str
    duration: str


class AccessStatus(Enum):
    """Where the current moment falls relative to an access window."""

    EARLY = "early"
    VALID = "valid"
    EXPIRED = "expired"
    INVALID = "invalid"


class AccessWindow(BaseModel):
    """Result of checking the current moment against an access window."""

    status: AccessStatus
    message: str
    minutes_remaining: int = 0
    seconds_remaining: int = 0
    ends_at: datetime | None = None

    @property
    def is_valid(self) -> bool:
        return self.status is AccessStatus.VALID


def token_checksum(payload: str) -> str:
    """Eight hex digit checksum of a token payload."""
    return f"{rolling_hash(payload):08x}"


def encode_access_token(email: str, date: str, time: str, duration: str) -> str:
    """Encode candidate access parameters into an opaque token.

    Args:
        email: Candidate email
        date: Start day, YYYY-MM-DD
        time: Start time, HH:MM
        duration: Window length such as ``3h``

    Returns:
        Base64 token of ``version:payload:checksum``

    Raises:
        AccessTokenError: If any parameter is empty
    """
    if not (email and date and time and duration):
        raise AccessTokenError("All parameters (email, date, time, duration) are required")

    payload = Constants.ACCESS_TOKEN_FIELD_SEPARATOR.join((email, date, time, duration))
    token_data = f"{Constants.ACCESS_TOKEN_VERSION}:{payload}:{token_checksum(payload)}"
    return base64.b64encode(token_data.encode("utf-8")).decode("ascii")


def decode_access_token(token: str) -> AccessGrant:
    """Decode and verify an access token.

    Args:
        token: Token produced by ``encode_access_token``

    Returns:
        The AccessGrant the token carries

    Raises:
        AccessTokenError: If the token is malformed, has another version or
            fails its checksum
    """
    try:
        token_data = base64.b64decode(token, validate=True).decode("utf-8")
    except ValueError as e:
        raise AccessTokenError(f"Failed to decode token: {e}") from e

    before_checksum, _, checksum = token_data.rpartition(":")
    version, _, payload = before_checksum.partition(":")

    if version != Constants.ACCESS_TOKEN_VERSION:
        raise AccessTokenError("Failed to decode token: Invalid token version")

    expected = token_checksum(payload)
    if checksum != expected:
        raise AccessTokenError(
            f"Failed to decode token: Token checksum validation failed "
            f"(got {checksum}, expected {expected})"
        )

    fields = payload.split(Constants.ACCESS_TOKEN_FIELD_SEPARATOR)
    if len(fields) < 4 or not all(fields[:4]):
        raise AccessTokenError("Failed to decode token: Invalid token format")

    email, date, time, duration = fields[:4]
    return AccessGrant(email=email, date=date, time=time, duration=duration)


def validate_access_window(
    date: str,
    time: str,
    duration: str,
    now: datetime | None = None,
) -> AccessWindow:
    """Check whether a moment falls inside an access window.

    The window opens at ``date`` ``time`` (local time) and stays open for the
    given number of hours, inclusive of both ends.

    Args:
        date: Start day, YYYY-MM-DD
        time: Start time, HH:MM
        duration: Window length such as ``3h``
        now: Moment to check (defaults to the current local time)

    Returns:
        AccessWindow describing the outcome
    """
    try:
        start = datetime.strptime(f"{date}T{time}", "%Y-%m-%dT%H:%M")
    except ValueError:
        return AccessWindow(status=AccessStatus.INVALID, message="Invalid date or time format")

    match = _DURATION_PATTERN.match(duration)
    if not match:
        return AccessWindow(
            status=AccessStatus.INVALID,
            message='Invalid duration format (use format like "3h")',
        )

    end = start + timedelta(hours=int(match.group(1)))
    now = now or datetime.now()

    if now < start:
        minutes_until_start = math.ceil((start - now).total_seconds() / 60)
        return AccessWindow(
            status=AccessStatus.EARLY,
            message=f"Access not yet available. Starts in {minutes_until_start} minute(s).",
            ends_at=end,
        )

    if now > end:
        return AccessWindow(
            status=AccessStatus.EXPIRED, message="Access window has expired", ends_at=end
        )

    remaining = (end - now).total_seconds()
    minutes_remaining = math.ceil(remaining / 60)
    logger.debug(f"Access window open until {end:%Y-%m-%d %H:%M}")
    return AccessWindow(
        status=AccessStatus.VALID,
        message=f"Access valid. Time remaining: {minutes_remaining} minute(s).",
        minutes_remaining=minutes_remaining,
        seconds_remaining=math.floor(remaining),
        ends_at=end,
    )


def validate_access_token(token: str, now: datetime | None = None) -> AccessWindow:
    """Decode a token and check its window in one step.

    Raises:
        AccessTokenError: If the token cannot be decoded
    """
    grant = decode_access_token(token)
    return validate_access_window(grant.date, grant.time, grant.duration, now)


def generate_access_link(base_url: str, email: str, date: str, time: str, duration: str) -> str:
    """Shareable link carrying an encoded access token."""
    return f"{base_url}?token={encode_access_token(email, date, time, duration)}"


def generate_temporary_access_url(
    base_url: str, email: str, date: str, time: str, duration: str
) -> str:
    """Link with the access parameters in plain query form."""
    params = urlencode({"email": email, "date": date, "time": time, "duration": duration})
    return f"{base_url}?{params}"
