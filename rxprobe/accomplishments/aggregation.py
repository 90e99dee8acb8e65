"""Merging submissions into the running accomplishment sets."""

from collections.abc import Iterable, Mapping

from rxprobe.core.types import FieldName

# Accumulated tags per field; a field with no tags is absent
Accomplishments = dict[FieldName, frozenset[str]]


def aggregate(
    existing: Mapping[FieldName, Iterable[str]],
    new_detections: Mapping[FieldName, Iterable[str]],
) -> tuple[Accomplishments, Accomplishments]:
    """Union a submission's detections into the accumulated accomplishments.

    Fields whose new detections are empty are carried over unchanged.
    Neither input is mutated.

    Args:
        existing: Accomplishments accumulated so far
        new_detections: Detections of the current submission, per field

    Returns:
        Tuple of (updated accomplishments, snapshot of the previous accomplishments)
    """
    previous: Accomplishments = {
        field: frozenset(tags) for field, tags in existing.items() if tags
    }
    updated = dict(previous)

    for field, tags in new_detections.items():
        tags = frozenset(tags)
        if tags:
            updated[field] = previous.get(field, frozenset()) | tags

    return updated, previous


def newly_earned(
    accomplishments: Mapping[FieldName, Iterable[str]],
    previous: Mapping[FieldName, Iterable[str]],
) -> dict[FieldName, frozenset[str]]:
    """Tags present now but not before, per field (fields with none are omitted)."""
    earned: dict[FieldName, frozenset[str]] = {}
    for field, tags in accomplishments.items():
        new_tags = frozenset(tags) - frozenset(previous.get(field, ()))
        if new_tags:
            earned[field] = new_tags
    return earned
