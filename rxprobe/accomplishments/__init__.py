"""Accomplishment aggregation, ordering and badge vocabulary."""

from rxprobe.accomplishments.aggregation import Accomplishments, aggregate, newly_earned
from rxprobe.accomplishments.badges import BADGE_ICONS, TAG_DESCRIPTIONS, describe_tag, icon_for_tag
from rxprobe.accomplishments.session import AccomplishmentSession, SubmissionResult
from rxprobe.accomplishments.sorting import BADGE_SORT_ORDER, badge_sort_key, sort_for_display

__all__ = [
    "BADGE_ICONS",
    "BADGE_SORT_ORDER",
    "TAG_DESCRIPTIONS",
    "AccomplishmentSession",
    "Accomplishments",
    "SubmissionResult",
    "aggregate",
    "badge_sort_key",
    "describe_tag",
    "icon_for_tag",
    "newly_earned",
    "sort_for_display",
]
