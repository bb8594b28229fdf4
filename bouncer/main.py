"""Issues bouncer entry point.

Runs one bounce pass (suitable for cron) or, with --loop, one pass per
scheduler.interval_seconds. Usage: bouncer [--dry-run] [--comment-only].
"""

import argparse
import logging
import sys
from pathlib import Path

from bouncer.config import load_config, validate_config
from bouncer.logging import BouncerLogging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="bouncer",
        description="Issues bouncer - unassign issues that stay assigned for too long",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log issues that would be bounced, change nothing",
    )
    parser.add_argument(
        "--comment-only",
        action="store_true",
        help="Post a warning comment but keep the assignee",
    )
    parser.add_argument(
        "--loop",
        action="store_true",
        help="Keep running, one pass per scheduler.interval_seconds",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point for bouncer."""
    args = parse_args(argv)

    config_path = args.config
    if not config_path.is_file() and config_path == Path("config.yaml"):
        if Path("config.example.yaml").is_file():
            config_path = Path("config.example.yaml")
            logging.basicConfig(level=logging.INFO)
            logging.getLogger("bouncer").warning("config.yaml not found, using config.example.yaml")

    log = logging.getLogger("bouncer.main")
    try:
        config = load_config(config_path)
        if args.dry_run:
            config.bouncer.dry_run = True
        if args.comment_only:
            config.bouncer.comment_only = True
        validate_config(config)
    except ValueError as e:  # ConfigError, pydantic ValidationError
        logging.basicConfig(level=logging.INFO)
        log.error("Invalid configuration: %s", e)
        return 1

    BouncerLogging(config.logging).setup(dry_run=config.bouncer.dry_run)

    if args.check:
        print("Config OK:", config.bot.repository)
        return 0

    from bouncer.scheduler import run_scheduler_loop
    from bouncer.services.pipeline import run_bouncer

    try:
        if args.loop:
            run_scheduler_loop(config)
        else:
            run_bouncer(config)
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        log.exception("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
