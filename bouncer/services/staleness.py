"""Decide which assigned issues have gone stale."""

import logging
from datetime import UTC, datetime, timedelta
from typing import List

from bouncer.models import Issue
from bouncer.services.matcher import has_related_pr

LOG = logging.getLogger("bouncer.services.staleness")

SECONDS_PER_DAY = 86400


def compute_threshold(days: int, now: datetime | None = None) -> datetime:
    """Return now minus days, in UTC; assignments at or before it are overdue.

    A naive now is taken as local time.
    """
    now = now.astimezone(UTC) if now is not None else datetime.now(UTC)
    return now - timedelta(seconds=days * SECONDS_PER_DAY)


def find_last_assignment(issue: Issue) -> datetime | None:
    """Timestamp of the most recent "assigned" event, or None."""
    times = [e.created_at for e in issue.events if e.event == "assigned" and e.created_at is not None]
    return max(times, default=None)


def find_last_bot_comment(issue: Issue, bot_username: str) -> datetime | None:
    """Timestamp of the most recent comment written by the bot, or None."""
    login = bot_username.casefold()
    times = [c.created_at for c in issue.comments if c.author.casefold() == login]
    return max(times, default=None)


def is_stale(
    issue: Issue,
    threshold: datetime,
    bot_username: str,
    pull_requests: List[Issue],
    repo: str,
    web_url: str = "https://github.com",
) -> bool:
    """True when the issue should be bounced.

    Requires an assignment at or before threshold, no bot comment after
    threshold and no pull request closing the issue.
    """
    if not issue.assignee:
        return False

    last_assignment = find_last_assignment(issue)
    if last_assignment is None or last_assignment > threshold:
        return False

    last_bot_comment = find_last_bot_comment(issue, bot_username)
    if last_bot_comment is not None and last_bot_comment > threshold:
        LOG.debug("Issue #%s already bounced at %s", issue.number, last_bot_comment.isoformat())
        return False

    if has_related_pr(issue.number, pull_requests, repo, web_url):
        LOG.debug("Issue #%s has a related pull request", issue.number)
        return False

    return True


def filter_stale_issues(
    issues: List[Issue],
    pull_requests: List[Issue],
    threshold: datetime,
    bot_username: str,
    repo: str,
    web_url: str = "https://github.com",
) -> List[Issue]:
    """Return the stale subset of issues, keeping order."""
    return [issue for issue in issues if is_stale(issue, threshold, bot_username, pull_requests, repo, web_url)]
