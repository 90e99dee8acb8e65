"""Run configuration for the RxProbe command line."""

import argparse
import json
from datetime import date

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from rxprobe.utils.debug import DebugTagMatcher
from rxprobe.utils.helpers import expand_file_path


class Config(BaseModel):
    """Configuration model, loaded from JSON and overridden by CLI arguments."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    submissions: str | None = None
    state: str | None = None
    report: str | None = None
    access_token: str | None = None
    today: date | None = None
    reset: bool = False
    verbose: bool = False
    debug: bool = False
    debug_tags: set[str] = set()
    debug_tag_matcher: DebugTagMatcher | None = None

    @field_validator("debug_tags", mode="before")
    @classmethod
    def parse_string_set(cls, value):
        """Accept a comma-separated string or a list of patterns."""
        if value is None:
            return set()
        if isinstance(value, str):
            return {part.strip() for part in value.split(",") if part.strip()}
        return set(value)

    @field_validator("submissions", "state", "report", mode="after")
    @classmethod
    def expand_paths(cls, value: str | None) -> str | None:
        return expand_file_path(value)

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        """Debug tag tracing needs both debug and verbose output."""
        if self.debug_tags and not (self.debug and self.verbose):
            raise ValueError("--debug-tags requires BOTH --debug and --verbose flags")
        if self.debug:
            self.verbose = True
        return self


# CLI destinations that map onto Config fields
_CLI_FIELDS = (
    "submissions",
    "state",
    "report",
    "access_token",
    "today",
    "debug_tags",
)
_CLI_FLAGS = ("reset", "verbose", "debug")


def load_config(
    config_file: str | None,
    cli_args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> Config:
    """Load configuration from a JSON file, then apply CLI overrides.

    Args:
        config_file: Optional path to a JSON configuration file
        cli_args: Parsed command-line arguments
        parser: Parser used to report configuration errors

    Returns:
        Validated Config
    """
    values: dict = {}

    if config_file:
        try:
            with open(expand_file_path(config_file), encoding="utf-8") as f:
                values = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            parser.error(f"Could not read config file {config_file}: {e}")
        if not isinstance(values, dict):
            parser.error(f"Config file {config_file} must contain a JSON object")

    for name in _CLI_FIELDS:
        value = getattr(cli_args, name, None)
        if value is not None:
            values[name] = value

    for name in _CLI_FLAGS:
        if getattr(cli_args, name, False):
            values[name] = True

    try:
        return Config(**values)
    except ValidationError as e:
        parser.error(str(e))
        raise
