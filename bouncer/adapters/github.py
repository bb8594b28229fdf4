"""GitHub API adapter."""

import logging
from datetime import datetime
from typing import Any, Dict, List

import requests

from bouncer.adapters.base import GitPlatformAdapter, GitPlatformError
from bouncer.adapters.pagination import Page, concat_pages
from bouncer.models import Comment, Issue, IssueEvent

LOG = logging.getLogger("bouncer.adapters.github")


def _parse_iso(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _issue_from_api(data: Dict[str, Any]) -> Issue:
    assignee = data.get("assignee") or {}
    comments = data.get("comments")
    return Issue(
        number=data["number"],
        title=data.get("title") or "",
        body=data.get("body") or "",
        state=data.get("state", "open"),
        assignee=assignee.get("login") or None,
        html_url=data.get("html_url"),
        is_pull_request="pull_request" in data,
        comments_count=comments if isinstance(comments, int) else None,
    )


def _comment_from_api(data: Dict[str, Any]) -> Comment:
    user = data.get("user") or {}
    return Comment(
        id=data["id"],
        body=data.get("body") or "",
        author=user.get("login", ""),
        created_at=_parse_iso(data["created_at"]),
    )


def _event_from_api(data: Dict[str, Any]) -> IssueEvent:
    created = data.get("created_at")
    return IssueEvent(
        id=data.get("id") or 0,
        event=data.get("event") or "",
        created_at=_parse_iso(created) if created else None,
    )


class GitHubAdapter(GitPlatformAdapter):
    """GitHub REST API v3 implementation."""

    def __init__(
        self,
        token: str,
        api_url: str = "https://api.github.com",
        timeout: float = 5.0,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        if path.startswith("http://") or path.startswith("https://"):
            url = path
        else:
            url = f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"
        try:
            resp = self._session.request(method, url, params=params, json=json, timeout=self._timeout)
        except requests.RequestException as e:
            raise GitPlatformError(f"{method} {url} failed: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except ValueError:
                pass
            raise GitPlatformError(f"{resp.status_code}: {msg}")
        return resp

    def _get_page(self, path: str, params: Dict[str, Any] | None = None) -> Page:
        resp = self._request("GET", path, params=params)
        next_link = resp.links.get("next") or {}
        return Page(items=resp.json() or [], next_url=next_link.get("url"))

    def get_next_page(self, page: Page) -> Page:
        if not page.next_url:
            raise GitPlatformError("No next page")
        LOG.debug("Fetching next page %s", page.next_url)
        # next_url already carries the query string
        return self._get_page(page.next_url)

    def _list_all(self, path: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        return concat_pages(self._get_page(path, params=params), self)

    def list_issues(self, repo: str, state: str = "all", per_page: int = 100) -> List[Issue]:
        data = self._list_all(f"/repos/{repo}/issues", {"state": state, "per_page": per_page})
        return [_issue_from_api(d) for d in data]

    def list_issue_comments(self, repo: str, issue_number: int) -> List[Comment]:
        data = self._list_all(f"/repos/{repo}/issues/{issue_number}/comments", {"per_page": 100})
        return [_comment_from_api(d) for d in data]

    def list_issue_events(self, repo: str, issue_number: int) -> List[IssueEvent]:
        data = self._list_all(f"/repos/{repo}/issues/{issue_number}/events", {"per_page": 100})
        return [_event_from_api(d) for d in data]

    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        resp = self._request("POST", f"/repos/{repo}/issues/{issue_number}/comments", json={"body": body})
        return _comment_from_api(resp.json())

    def unassign_issue(self, repo: str, issue_number: int) -> None:
        self._request("PATCH", f"/repos/{repo}/issues/{issue_number}", json={"assignees": []})
