"""End-to-end runs of the command line entry point."""

import json
import sys
from datetime import datetime, timedelta

import pytest
import yaml

from rxprobe.__main__ import main
from rxprobe.access import encode_access_token

SUBMISSIONS = """\
submissions:
  - medication: aspirin
    dateOfBirth: "2014-10-19"
    weight: 40
    dosage: 325
    frequency: 4
    enter: true
  - medication: ""
"""


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["rxprobe", *argv])
    main()


@pytest.fixture
def submissions_file(tmp_path):
    path = tmp_path / "submissions.yml"
    path.write_text(SUBMISSIONS, encoding="utf-8")
    return path


def test_replay_writes_state_and_report(monkeypatch, tmp_path, submissions_file):
    """A replay persists the session and writes the badge report."""
    state = tmp_path / "session.json"
    report = tmp_path / "badges.yml"

    _run(
        monkeypatch,
        "--submissions", str(submissions_file),
        "--state", str(state),
        "--report", str(report),
        "--today", "2026-10-19",
    )

    stored = json.loads(state.read_text(encoding="utf-8"))
    assert "enter_submit" in stored["detector_form_accomplishments"]["data"]

    document = yaml.safe_load(report.read_text(encoding="utf-8"))
    assert "medication_empty_value" in document["submission"]
    assert "form_nominal_form_aspirin" in document["submission"]


def test_state_accumulates_across_runs(monkeypatch, tmp_path, submissions_file):
    """A second run starts from the stored badges."""
    state = tmp_path / "session.json"
    _run(monkeypatch, "-s", str(submissions_file), "--state", str(state), "--today", "2026-10-19")
    before = state.read_text(encoding="utf-8")

    _run(monkeypatch, "--state", str(state))
    stored = json.loads(state.read_text(encoding="utf-8"))
    assert stored["detector_accomplishments"] == json.loads(before)["detector_accomplishments"]


def test_reset_clears_state(monkeypatch, tmp_path, submissions_file):
    """--reset starts the replay from an empty session."""
    state = tmp_path / "session.json"
    _run(monkeypatch, "-s", str(submissions_file), "--state", str(state), "--today", "2026-10-19")
    _run(monkeypatch, "--state", str(state), "--reset")

    stored = json.loads(state.read_text(encoding="utf-8"))
    assert stored["detector_accomplishments"]["data"] == {}


def test_json_config(monkeypatch, tmp_path, submissions_file):
    """Settings can come from a JSON config file."""
    report = tmp_path / "badges.yml"
    config_file = tmp_path / "config.json"
    config_file.write_text(
        json.dumps({"submissions": str(submissions_file), "report": str(report)}),
        encoding="utf-8",
    )

    _run(monkeypatch, "--config", str(config_file))
    assert report.exists()


def test_missing_inputs_exit(monkeypatch):
    """Nothing to replay and nothing to load is a usage error."""
    with pytest.raises(SystemExit):
        _run(monkeypatch)


def test_expired_access_token_exits(monkeypatch, submissions_file):
    """A token whose window has passed stops the run."""
    token = encode_access_token("dev@example.com", "2020-01-01", "09:00", "3h")
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, "-s", str(submissions_file), "--access-token", token)
    assert exc_info.value.code == 1


def test_open_access_token_runs(monkeypatch, tmp_path, submissions_file):
    """A token whose window is open lets the run proceed."""
    start = datetime.now() - timedelta(minutes=5)
    token = encode_access_token(
        "dev@example.com", start.strftime("%Y-%m-%d"), start.strftime("%H:%M"), "1h"
    )
    report = tmp_path / "badges.yml"
    _run(monkeypatch, "-s", str(submissions_file), "--access-token", token, "-r", str(report))
    assert report.exists()
