"""Constants used throughout the RxProbe codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Field length limits
    MEDICATION_MAX_LENGTH = 20
    """Maximum accepted length of the medication field."""

    DATE_OF_BIRTH_MAX_LENGTH = 20
    """Length at which the date of birth field reports its max-length boundary."""

    NUMERIC_MAX_LENGTH = 10
    """Maximum accepted length of the weight, dosage and frequency fields."""

    TOTAL_MAX_LENGTH = 100
    """Hard input length ceiling shared by every field."""

    # Age limits
    MAX_REALISTIC_AGE_YEARS = 150
    """Oldest age (in whole years) a date of birth may produce."""

    # Decimal handling
    MAX_DECIMAL_PRECISION = 3
    """Digits after the decimal point before a value counts as high precision."""

    # String separators
    MEDICATION_TAG_SEPARATOR = "_"
    """Separator between a medication name and its pattern in scoped tags."""

    SUBMISSION_SEPARATOR = ", "
    """Separator used when flattening accomplishments for submission."""

    FORM_TAG_PREFIX = "form"
    """Prefix for form-level accomplishments in submission strings."""

    # Access tokens
    ACCESS_TOKEN_VERSION = "1"
    """Version marker embedded in every access token."""

    ACCESS_TOKEN_FIELD_SEPARATOR = "|"
    """Separator between the fields of an access token payload."""

    # Storage
    CHECKSUM_SECRET = "detector_v1_security_key"
    """Salt appended to serialized session data before checksumming."""
