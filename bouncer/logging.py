"""Root logger setup for bounce passes.

Level and format come from config.yaml (logging.level, logging.format) or
env (LOGGING_LEVEL, LOGGING_FORMAT). In dry-run mode every line carries
DRY_RUN_PREFIX, so "Bouncing ..." output is never mistaken for a real pass.
Modules log through logging.getLogger("bouncer.<area>").
"""

import logging

from bouncer.config import LoggingConfig

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DRY_RUN_PREFIX = "[dry-run] "

# HTTP client loggers; one DEBUG line per request is noise next to per-issue output
QUIET_LOGGERS = ("urllib3", "requests")


def _resolve_level(level: str) -> int:
    """Map level name to logging constant; unknown names give INFO."""
    return LEVELS.get(level.upper().strip(), logging.INFO)


class BouncerLogging:
    """Configures the root logger for one bouncer process."""

    def __init__(self, config: LoggingConfig) -> None:
        self.level = _resolve_level(config.level)
        self.format = config.format or DEFAULT_FORMAT

    def line_format(self, dry_run: bool = False) -> str:
        """Format string used for records, prefixed in dry-run mode."""
        return DRY_RUN_PREFIX + self.format if dry_run else self.format

    def setup(self, dry_run: bool = False) -> None:
        """Apply level and format to the root logger and quiet HTTP loggers."""
        logging.basicConfig(level=self.level, format=self.line_format(dry_run), force=True)
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(max(self.level, logging.WARNING))
