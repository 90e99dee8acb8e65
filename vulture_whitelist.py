"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.parse_string_set  # noqa: F821  # unused method (rxprobe/core/config.py:31)
_.expand_paths  # noqa: F821  # unused method (rxprobe/core/config.py:41)
_.coerce_to_text  # noqa: F821  # unused method (rxprobe/processing/data_models.py:28)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (rxprobe/core/config.py:45)

# Pydantic model_config class variable - read by framework at class definition time
# Required to allow non-Pydantic types (DebugTagMatcher) in Config model
model_config  # noqa: F821  # unused variable (rxprobe/core/config.py:16)

# Pydantic model_config class variable - read by framework at class definition time
# Required to accept both dateOfBirth and date_of_birth in FormSubmission
model_config  # noqa: F821  # unused variable (rxprobe/processing/data_models.py:17)

# Public API used by callers outside the command line - vulture can't detect usage through imports
generate_temporary_access_url  # unused function (rxprobe/access/token.py:204)
