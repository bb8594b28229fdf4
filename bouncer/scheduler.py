"""Scheduler: run a bounce pass every interval_seconds."""

import logging
import time

from bouncer.config import AppConfig
from bouncer.services.pipeline import run_bouncer

LOG = logging.getLogger("bouncer.scheduler")


def run_scheduler_loop(config: AppConfig, interval_seconds: int | None = None) -> None:
    """Loop forever: bounce, then sleep. A failed pass is logged and retried next tick."""
    interval = interval_seconds or config.scheduler.interval_seconds
    LOG.info("Scheduler started | repo=%s | interval=%ss", config.bot.repository, interval)
    while True:
        try:
            run_bouncer(config)
        except Exception as e:
            LOG.exception("Bounce pass failed: %s", e)
        time.sleep(interval)
