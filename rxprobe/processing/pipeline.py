"""Replay pipeline: access check, session load, submissions, persistence, report."""

import time
from datetime import datetime

from loguru import logger
from tqdm import tqdm

from rxprobe.access import AccessTokenError, validate_access_token
from rxprobe.accomplishments.badges import icon_for_tag
from rxprobe.accomplishments.session import AccomplishmentSession, SubmissionResult
from rxprobe.accomplishments.sorting import sort_for_display
from rxprobe.core.config import Config
from rxprobe.processing.data_models import FormSubmission, ReplayResult
from rxprobe.processing.loading import load_submissions
from rxprobe.reports import write_yaml_report
from rxprobe.storage import SessionStore


def check_access(config: Config, now: datetime | None = None) -> None:
    """Refuse to run outside the access window of the configured token.

    Raises:
        AccessTokenError: If the token is unreadable or its window is not open
    """
    if not config.access_token:
        return

    window = validate_access_token(config.access_token, now)
    if not window.is_valid:
        raise AccessTokenError(window.message)
    if config.verbose:
        logger.info(f"  {window.message}")


def _log_submission(index: int, result: SubmissionResult) -> None:
    for field, errors in result.errors.items():
        for error in errors:
            logger.info(f"  #{index} {field.value}: {error}")
    for field, tags in result.new_badges.items():
        badges = ", ".join(f"{icon_for_tag(tag)} {tag}" for tag in sort_for_display(tags))
        logger.info(f"  #{index} {field.value} new: {badges}")
    if result.new_form_badges:
        badges = ", ".join(sort_for_display(result.new_form_badges))
        logger.info(f"  #{index} form new: {badges}")


def replay_submissions(
    session: AccomplishmentSession,
    submissions: list[FormSubmission],
    config: Config,
) -> list[SubmissionResult]:
    """Submit each recorded form to the session in order.

    Args:
        session: Session to accumulate into
        submissions: Recorded submissions
        config: Configuration (reference date, verbosity, debug tags)

    Returns:
        One SubmissionResult per submission
    """
    iterator = submissions
    if config.verbose:
        iterator = tqdm(submissions, desc="Replaying submissions", unit="form")

    results = []
    for index, submission in enumerate(iterator, start=1):
        result = session.submit(
            submission.form_values(),
            submission.context(),
            today=config.today,
            debug_tag_matcher=config.debug_tag_matcher,
        )
        if config.verbose:
            _log_submission(index, result)
        results.append(result)
    return results


def run_pipeline(config: Config) -> ReplayResult:
    """Run a full replay.

    Args:
        config: Validated configuration

    Returns:
        ReplayResult with the final session and per-submission results
    """
    start_time = time.time()
    check_access(config)

    store = SessionStore(config.state) if config.state else None
    if store is None:
        session = AccomplishmentSession()
    else:
        session = store.load()
        if config.reset:
            session.reset()
            if config.verbose:
                logger.info("  Session reset")

    submissions = load_submissions(config.submissions) if config.submissions else []
    if config.verbose:
        logger.info(f"  Replaying {len(submissions)} submissions")

    results = replay_submissions(session, submissions, config)

    if store is not None:
        store.save(session)
    if config.report:
        write_yaml_report(session, config.report)

    replay = ReplayResult(session=session, results=results)
    if config.verbose:
        elapsed = time.time() - start_time
        logger.info(
            f"  {len(results)} submissions, {replay.invalid_count} with errors, "
            f"{session.badge_count} badges in total ({elapsed:.2f}s)"
        )
    return replay
