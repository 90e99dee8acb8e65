"""Debug tracing for individual detection tags."""

from dataclasses import dataclass, field
from re import Pattern

from loguru import logger

from rxprobe.utils.helpers import compile_wildcard_regex


@dataclass
class DebugTagMatcher:
    """Matches detection tags against user-supplied debug patterns.

    Exact patterns are stored in a set for O(1) lookups; patterns containing
    ``*`` are compiled to regexes.
    """

    exact: set[str] = field(default_factory=set)
    wildcards: list[Pattern] = field(default_factory=list)

    @classmethod
    def from_patterns(cls, patterns: set[str] | list[str]) -> "DebugTagMatcher":
        """Build a matcher from raw patterns such as ``aspirin_*`` or ``empty_value``."""
        matcher = cls()
        for pattern in patterns:
            pattern = pattern.strip()
            if not pattern:
                continue
            if "*" in pattern:
                matcher.wildcards.append(compile_wildcard_regex(pattern))
            else:
                matcher.exact.add(pattern)
        return matcher

    def matches(self, tag: str) -> bool:
        """Return True if the tag is one the user asked to trace."""
        if tag in self.exact:
            return True
        return any(regex.match(tag) for regex in self.wildcards)


def is_debug_tag(tag: str, debug_tag_matcher: DebugTagMatcher | None) -> bool:
    """Check whether a tag should be traced."""
    return debug_tag_matcher is not None and debug_tag_matcher.matches(tag)


def log_debug_tag(tag: str, message: str, scope: str = "") -> None:
    """Log a debug message for a traced tag.

    Args:
        tag: The detection tag being traced
        message: What happened to the tag
        scope: Field or stage the message belongs to
    """
    where = f"[{scope}] " if scope else ""
    logger.debug(f"[DEBUG TAG: {tag}] {where}{message}")


def log_if_debug_tags(
    tags: set[str],
    message: str,
    debug_tag_matcher: DebugTagMatcher | None,
    scope: str = "",
) -> None:
    """Log a message for every traced tag in a set."""
    if debug_tag_matcher is None:
        return
    for tag in sorted(tags):
        if is_debug_tag(tag, debug_tag_matcher):
            log_debug_tag(tag, message, scope)
