"""Data models for issues, pull requests, comments and events (Pydantic)."""

from bouncer.models.comment import Comment
from bouncer.models.event import IssueEvent
from bouncer.models.issue import Issue

__all__ = ["Comment", "Issue", "IssueEvent"]
