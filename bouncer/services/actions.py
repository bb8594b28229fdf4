"""Comment on and unassign stale issues."""

import logging
from dataclasses import dataclass, field
from typing import List

from bouncer.adapters.base import GitPlatformAdapter, GitPlatformError
from bouncer.config import BouncerConfig
from bouncer.models import Issue

LOG = logging.getLogger("bouncer.services.actions")


@dataclass
class BounceReport:
    """Issue numbers handled by one run."""

    bounced: List[int] = field(default_factory=list)
    failed: List[int] = field(default_factory=list)
    dry_run: bool = False


def format_message(template: str, assignee: str, days: int) -> str:
    """Fill {assignee} and {days} in a warning or unassignment template."""
    return template.format(assignee=assignee, days=days)


def issue_url(web_url: str, repo: str, issue_number: int) -> str:
    return f"{web_url.rstrip('/')}/{repo}/issues/{issue_number}"


def bounce_issue(adapter: GitPlatformAdapter, issue: Issue, repo: str, settings: BouncerConfig) -> None:
    """Post the comment, then clear the assignee unless comment_only.

    A failing comment call skips the unassignment.
    """
    template = settings.warning_message if settings.comment_only else settings.unassign_message
    body = format_message(template, issue.assignee or "", settings.days_before_unassign)
    adapter.create_comment(repo, issue.number, body)
    if not settings.comment_only:
        adapter.unassign_issue(repo, issue.number)


def take_actions(
    adapter: GitPlatformAdapter,
    issues: List[Issue],
    repo: str,
    settings: BouncerConfig,
    web_url: str = "https://github.com",
) -> BounceReport:
    """Bounce issues one after another.

    In dry-run mode nothing is sent. An API error on one issue is logged
    and the remaining issues are still processed.
    """
    report = BounceReport(dry_run=settings.dry_run)
    for issue in issues:
        url = issue.html_url or issue_url(web_url, repo, issue.number)
        LOG.info("Bouncing %s \"%s\" (assignee: %s)", url, issue.title, issue.assignee)
        if settings.dry_run:
            LOG.info("Dry run: no comment posted on #%s", issue.number)
            report.bounced.append(issue.number)
            continue
        try:
            bounce_issue(adapter, issue, repo, settings)
        except GitPlatformError as e:
            LOG.exception("Failed to bounce issue #%s: %s", issue.number, e)
            report.failed.append(issue.number)
            continue
        report.bounced.append(issue.number)
    return report
