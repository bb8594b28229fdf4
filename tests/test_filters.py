"""Tests for eligible-issue filtering and PR/issue splitting."""

from bouncer.models import Issue
from bouncer.services.filters import filter_eligible_issues, split_pull_requests


def test_filter_keeps_prs_and_open_assigned_issues() -> None:
    """PRs are always kept; plain issues need to be open and assigned."""
    issues = [
        Issue(number=1, state="open", assignee="alice"),
        Issue(number=2, state="closed", assignee="bob"),
        Issue(number=3, state="open", assignee=None),
        Issue(number=4, state="closed", assignee=None, is_pull_request=True),
        Issue(number=5, state="open", assignee=None, is_pull_request=True),
    ]
    assert [i.number for i in filter_eligible_issues(issues)] == [1, 4, 5]


def test_filter_empty() -> None:
    """Empty input gives empty output."""
    assert filter_eligible_issues([]) == []


def test_split_pull_requests_preserves_order() -> None:
    """Items are partitioned by the PR marker, order kept in each group."""
    issues = [
        Issue(number=1, assignee="a"),
        Issue(number=2, is_pull_request=True),
        Issue(number=3, assignee="b"),
        Issue(number=4, is_pull_request=True),
    ]
    pull_requests, plain = split_pull_requests(issues)
    assert [p.number for p in pull_requests] == [2, 4]
    assert [i.number for i in plain] == [1, 3]


def test_split_does_not_modify_input() -> None:
    """The input list is left untouched."""
    issues = [Issue(number=1), Issue(number=2, is_pull_request=True)]
    split_pull_requests(issues)
    assert [i.number for i in issues] == [1, 2]
