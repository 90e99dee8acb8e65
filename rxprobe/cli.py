"""Command-line interface."""

import argparse
from datetime import date


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Replay prescription form submissions and collect testing badges",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Replay submissions and keep the session between runs
  %(prog)s --submissions submissions.yml --state session.json -v

  # Using JSON config (CLI overrides JSON)
  %(prog)s --config config.json --report badges.yml

  # Trace every aspirin badge through detection
  %(prog)s --submissions submissions.yml -v --debug --debug-tags "aspirin_*"

  # Start over
  %(prog)s --state session.json --reset

Example submissions.yml:
submissions:
  - medication: aspirin
    dateOfBirth: "2000-01-15"
    weight: "70"
    dosage: "500"
    frequency: "3"
    enter: true

Example config.json:
{
  "submissions": "submissions.yml",
  "state": "~/.rxprobe/session.json",
  "report": "./badges.yml",
  "today": "2026-10-19",
  "verbose": true
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Input and output
    parser.add_argument(
        "-s", "--submissions", type=str, help="YAML file of form submissions to replay"
    )
    parser.add_argument(
        "--state", type=str, help="Session file (accomplishments persist between runs)"
    )
    parser.add_argument("-r", "--report", type=str, help="Write a YAML badge report")

    # Session
    parser.add_argument(
        "--access-token", type=str, help="Candidate access token gating the run"
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        help="Reference date for age calculations (YYYY-MM-DD, default: today)",
    )
    parser.add_argument(
        "--reset", action="store_true", help="Clear stored accomplishments before replaying"
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Debug output (requires --verbose for tag tracing)"
    )
    parser.add_argument(
        "--debug-tags",
        type=str,
        help="Comma-separated detection tags to trace, wildcards allowed (e.g. 'aspirin_*')",
    )

    return parser
