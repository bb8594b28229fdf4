"""Git hosting platform issue model.

Pull requests share the issue shape; ``is_pull_request`` tells them apart.
``comments`` and ``events`` start empty and are attached by the enricher;
``comments_count`` is None when the API did not report it.
"""

from typing import List

from pydantic import BaseModel, Field

from bouncer.models.comment import Comment
from bouncer.models.event import IssueEvent


class Issue(BaseModel):
    """Git hosting platform issue (or pull request)."""

    number: int
    title: str = ""
    body: str = ""
    state: str = "open"
    assignee: str | None = None
    html_url: str | None = None
    is_pull_request: bool = False
    comments_count: int | None = None
    comments: List[Comment] = Field(default_factory=list)
    events: List[IssueEvent] = Field(default_factory=list)
