"""Git platform adapters."""

from bouncer.adapters.base import GitPlatformAdapter, GitPlatformError
from bouncer.adapters.github import GitHubAdapter
from bouncer.adapters.pagination import Page, concat_pages

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter", "Page", "concat_pages"]
