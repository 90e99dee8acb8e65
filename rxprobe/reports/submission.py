"""Flattened and YAML renderings of a session's accomplishments."""

from collections.abc import Iterable, Mapping
from datetime import datetime
from pathlib import Path
from typing import TextIO

import yaml
from loguru import logger

from rxprobe.accomplishments.badges import describe_tag, icon_for_tag
from rxprobe.accomplishments.session import AccomplishmentSession
from rxprobe.accomplishments.sorting import sort_for_display
from rxprobe.core.types import FieldName
from rxprobe.utils.constants import Constants
from rxprobe.utils.helpers import write_file_safely


def format_accomplishments_for_submission(
    accomplishments: Mapping[FieldName, Iterable[str]],
    form_accomplishments: Iterable[str],
) -> str:
    """Flatten accomplishments into ``field_tag, ..., form_tag`` form.

    Fields appear in form order and tags in display order.

    Args:
        accomplishments: Accumulated tags per field
        form_accomplishments: Accumulated form-level tags

    Returns:
        Comma-separated string, empty when there is nothing to report
    """
    items = [
        f"{field.value}_{tag}"
        for field in FieldName
        for tag in sort_for_display(accomplishments.get(field, ()))
    ]
    items.extend(
        f"{Constants.FORM_TAG_PREFIX}_{tag}" for tag in sort_for_display(form_accomplishments)
    )
    return Constants.SUBMISSION_SEPARATOR.join(items)


def _badge_entries(tags: Iterable[str], new_tags: frozenset[str] = frozenset()) -> list[dict]:
    entries = []
    for tag in sort_for_display(tags):
        entry = {"tag": tag, "icon": icon_for_tag(tag), "description": describe_tag(tag)}
        if tag in new_tags:
            entry["new"] = True
        entries.append(entry)
    return entries


def build_report(session: AccomplishmentSession) -> dict:
    """Assemble the report document for a session."""
    fields = {}
    for field in FieldName:
        tags = session.accomplishments.get(field, frozenset())
        if not tags:
            continue
        new_tags = tags - session.previous_accomplishments.get(field, frozenset())
        fields[field.value] = _badge_entries(tags, new_tags)

    return {
        "generated": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "total_badges": session.badge_count,
        "fields": fields,
        "form": _badge_entries(session.form_accomplishments),
        "submission": format_accomplishments_for_submission(
            session.accomplishments, session.form_accomplishments
        ),
    }


def write_yaml_report(session: AccomplishmentSession, filepath: str | Path) -> None:
    """Write the session's badges as a YAML report.

    Args:
        session: Session to report on
        filepath: Destination file
    """
    report = build_report(session)

    def write_content(f: TextIO) -> None:
        yaml.safe_dump(
            report,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
            width=float("inf"),
        )

    write_file_safely(filepath, write_content, "writing accomplishment report")
    logger.info(f"Wrote report with {report['total_badges']} badges to {filepath}")
