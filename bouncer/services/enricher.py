"""Attach comments and events to issues, fetching in parallel."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List

from bouncer.adapters.base import GitPlatformAdapter
from bouncer.models import Issue

LOG = logging.getLogger("bouncer.services.enricher")


def enrich_issue(adapter: GitPlatformAdapter, repo: str, issue: Issue) -> Issue:
    """Return a copy of issue with its comments (and events, for plain issues).

    The comment fetch is skipped when the issue reports zero comments.
    """
    comments = [] if issue.comments_count == 0 else adapter.list_issue_comments(repo, issue.number)
    events = [] if issue.is_pull_request else adapter.list_issue_events(repo, issue.number)
    return issue.model_copy(update={"comments": comments, "events": events})


def enrich_issues(
    adapter: GitPlatformAdapter,
    repo: str,
    issues: List[Issue],
    max_workers: int = 8,
) -> List[Issue]:
    """Enrich every issue; at most max_workers issues are fetched at once.

    The result keeps the input order. The first fetch error cancels
    pending work and propagates.
    """
    if max_workers <= 1 or len(issues) <= 1:
        return [enrich_issue(adapter, repo, issue) for issue in issues]

    LOG.debug("Fetching comments/events for %d items with %d workers", len(issues), max_workers)
    results: List[Issue | None] = [None] * len(issues)
    executor = ThreadPoolExecutor(max_workers=max_workers)
    try:
        futures = {executor.submit(enrich_issue, adapter, repo, issue): index for index, issue in enumerate(issues)}
        for future in as_completed(futures):
            results[futures[future]] = future.result()
    except BaseException:
        executor.shutdown(wait=True, cancel_futures=True)
        raise
    executor.shutdown(wait=True)
    return [issue for issue in results if issue is not None]
