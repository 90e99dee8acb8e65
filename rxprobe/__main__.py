"""Main entry point for rxprobe package."""

from loguru import logger

from rxprobe.access import AccessTokenError
from rxprobe.cli import create_parser
from rxprobe.core import load_config
from rxprobe.processing import run_pipeline
from rxprobe.utils.debug import DebugTagMatcher
from rxprobe.utils.logging import setup_logger


def _print_startup_banner(verbose: bool) -> None:
    """Print startup banner if verbose."""
    if verbose:
        logger.info("=" * 60)
        logger.info("RxProbe - Prescription Form Testing Badges")
        logger.info("=" * 60)
        logger.info("")


def _validate_config(config, parser) -> None:
    """Validate configuration settings."""
    if not config.submissions and not config.state:
        parser.error("Must specify --submissions or --state (or both)")

    if config.reset and not config.state:
        logger.warning("--reset has no effect without --state")


def _setup_debug_matcher(config) -> None:
    """Create debug tag matcher if needed."""
    if config.debug_tags:
        config.debug_tag_matcher = DebugTagMatcher.from_patterns(config.debug_tags)


def _print_config_summary(config) -> None:
    """Print configuration summary if verbose."""
    if config.verbose:
        logger.info("Configuration:")
        if config.submissions:
            logger.info(f"  Submissions: {config.submissions}")
        if config.state:
            logger.info(f"  Session file: {config.state}")
        if config.report:
            logger.info(f"  Report: {config.report}")
        if config.today:
            logger.info(f"  Reference date: {config.today.isoformat()}")
        if config.debug_tags:
            logger.info(f"  Debug tags: {', '.join(sorted(config.debug_tags))}")
        logger.info("")


def _run_pipeline_with_error_handling(config) -> None:
    """Run pipeline with proper error handling."""
    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Replay completed successfully")
            logger.info("=" * 60)
    except AccessTokenError as e:
        logger.error(f"Access denied: {e}")
        raise SystemExit(1) from e
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Replay interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Replay failed")
            logger.error("=" * 60)
        raise


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    # Print startup banner
    _print_startup_banner(config.verbose)

    # Validate configuration
    _validate_config(config, parser)

    # Setup debug matcher
    _setup_debug_matcher(config)

    # Print configuration summary
    _print_config_summary(config)

    # Run pipeline
    _run_pipeline_with_error_handling(config)


if __name__ == "__main__":
    main()
