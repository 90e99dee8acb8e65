"""Unit tests for submission strings and YAML reports."""

import yaml

from rxprobe.accomplishments import AccomplishmentSession
from rxprobe.core.types import FieldName
from rxprobe.reports import build_report, format_accomplishments_for_submission, write_yaml_report


class TestFormatAccomplishmentsForSubmission:
    """Test format_accomplishments_for_submission."""

    def test_fields_then_form(self) -> None:
        """Field tags come first in display order, then form tags."""
        result = format_accomplishments_for_submission(
            {FieldName.MEDICATION: {"nominal_value", "empty_value"}},
            {"nominal_form"},
        )
        assert result == "medication_empty_value, medication_nominal_value, form_nominal_form"

    def test_fields_in_form_order(self) -> None:
        """Fields are listed in form order, not insertion order."""
        result = format_accomplishments_for_submission(
            {FieldName.FREQUENCY: {"nominal_value"}, FieldName.WEIGHT: {"nominal_value"}},
            set(),
        )
        assert result == "weight_nominal_value, frequency_nominal_value"

    def test_nothing_to_report(self) -> None:
        """An empty session flattens to an empty string."""
        assert format_accomplishments_for_submission({}, set()) == ""


class TestBuildReport:
    """Test build_report and write_yaml_report."""

    def _session(self) -> AccomplishmentSession:
        return AccomplishmentSession(
            accomplishments={FieldName.WEIGHT: frozenset({"nominal_value", "decimal_value"})},
            previous_accomplishments={FieldName.WEIGHT: frozenset({"nominal_value"})},
            form_accomplishments=frozenset({"enter_submit"}),
        )

    def test_report_sections(self) -> None:
        """The report carries totals, fields, form badges and the submission string."""
        report = build_report(self._session())

        assert report["total_badges"] == 3
        assert [entry["tag"] for entry in report["fields"]["weight"]] == [
            "decimal_value",
            "nominal_value",
        ]
        assert report["form"][0]["tag"] == "enter_submit"

    def test_new_badges_are_marked(self) -> None:
        """Badges missing from the previous snapshot are marked new."""
        report = build_report(self._session())
        entries = {entry["tag"]: entry for entry in report["fields"]["weight"]}
        assert entries["decimal_value"].get("new") is True
        assert "new" not in entries["nominal_value"]

    def test_write_yaml_report(self, tmp_path) -> None:
        """The YAML report reads back to the same document."""
        report_file = tmp_path / "reports" / "badges.yml"
        write_yaml_report(self._session(), report_file)

        loaded = yaml.safe_load(report_file.read_text(encoding="utf-8"))
        assert loaded["submission"] == (
            "weight_decimal_value, weight_nominal_value, form_enter_submit"
        )
