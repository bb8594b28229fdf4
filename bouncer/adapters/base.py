"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import List

from bouncer.adapters.pagination import Page
from bouncer.models import Comment, Issue, IssueEvent


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class GitPlatformAdapter(ABC):
    """Abstract interface for the issue tracker the bouncer works on."""

    @abstractmethod
    def list_issues(self, repo: str, state: str = "all", per_page: int = 100) -> List[Issue]:
        """List all issues and pull requests of a repo (every page)."""
        ...

    @abstractmethod
    def list_issue_comments(self, repo: str, issue_number: int) -> List[Comment]:
        """List all comments on an issue or PR, oldest first."""
        ...

    @abstractmethod
    def list_issue_events(self, repo: str, issue_number: int) -> List[IssueEvent]:
        """List all events of an issue, oldest first."""
        ...

    @abstractmethod
    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        """Post a comment on an issue."""
        ...

    @abstractmethod
    def unassign_issue(self, repo: str, issue_number: int) -> None:
        """Clear the assignee of an issue."""
        ...

    def has_next_page(self, page: Page) -> bool:
        """Return True when page links to a following page."""
        return bool(page.next_url)

    @abstractmethod
    def get_next_page(self, page: Page) -> Page:
        """Fetch the page following page."""
        ...
