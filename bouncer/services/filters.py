"""Cheap filters applied to the raw issue list."""

from typing import List, Tuple

from bouncer.models import Issue


def filter_eligible_issues(issues: List[Issue]) -> List[Issue]:
    """Keep pull requests and open, assigned plain issues.

    Pull requests are kept for cross-referencing; closed or unassigned
    issues are dropped before their comments and events are fetched.
    """
    return [issue for issue in issues if issue.is_pull_request or (issue.assignee and issue.state == "open")]


def split_pull_requests(issues: List[Issue]) -> Tuple[List[Issue], List[Issue]]:
    """Partition issues into (pull_requests, plain_issues), keeping order."""
    pull_requests: List[Issue] = []
    plain: List[Issue] = []
    for issue in issues:
        (pull_requests if issue.is_pull_request else plain).append(issue)
    return pull_requests, plain
