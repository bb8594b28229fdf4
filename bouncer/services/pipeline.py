"""One bounce pass over a repository.

Stages: list issues -> keep PRs and open assigned issues -> fetch comments
and events -> split PRs from issues -> keep stale issues -> act.
"""

import logging
from datetime import datetime

from bouncer.adapters.base import GitPlatformAdapter
from bouncer.adapters.github import GitHubAdapter
from bouncer.config import AppConfig
from bouncer.services.actions import BounceReport, take_actions
from bouncer.services.enricher import enrich_issues
from bouncer.services.filters import filter_eligible_issues, split_pull_requests
from bouncer.services.staleness import compute_threshold, filter_stale_issues

LOG = logging.getLogger("bouncer.services.pipeline")


class IssuesBouncer:
    """Finds issues assigned for too long and bounces them."""

    def __init__(self, adapter: GitPlatformAdapter, config: AppConfig, now: datetime | None = None) -> None:
        self._adapter = adapter
        self._config = config
        self._repo = config.bot.repository or ""
        self._bot_username = config.bot.github_username or ""
        self._settings = config.bouncer
        # Fixed for the whole run
        self.threshold = compute_threshold(self._settings.days_before_unassign, now)

    def run(self) -> BounceReport:
        """Run every stage and return what was bounced."""
        LOG.info("Issues bouncer started, please be patient!")
        LOG.debug("Repo %s, threshold %s", self._repo, self.threshold.isoformat())

        issues = self._adapter.list_issues(self._repo, state="all", per_page=self._settings.issues_per_page)
        eligible = filter_eligible_issues(issues)
        LOG.debug("%d of %d items kept for inspection", len(eligible), len(issues))

        enriched = enrich_issues(self._adapter, self._repo, eligible, max_workers=self._settings.max_workers)
        pull_requests, plain_issues = split_pull_requests(enriched)
        LOG.debug("%d pull requests, %d assigned open issues", len(pull_requests), len(plain_issues))

        stale = filter_stale_issues(
            plain_issues,
            pull_requests,
            self.threshold,
            self._bot_username,
            self._repo,
            self._config.github.web_url,
        )
        report = take_actions(self._adapter, stale, self._repo, self._settings, self._config.github.web_url)

        if report.failed:
            LOG.warning("Could not bounce %d issues: %s", len(report.failed), report.failed)
        LOG.info("Done, %d issues bounced!", len(report.bounced))
        return report


def make_adapter(config: AppConfig) -> GitPlatformAdapter:
    """Build the GitHub adapter from config (timeout given in ms)."""
    return GitHubAdapter(
        token=config.github_token_resolved or "",
        api_url=config.github.api_url,
        timeout=config.bouncer.requests_timeout / 1000,
    )


def run_bouncer(config: AppConfig, now: datetime | None = None) -> BounceReport:
    """Single pass with a fresh adapter and threshold."""
    return IssuesBouncer(make_adapter(config), config, now=now).run()
