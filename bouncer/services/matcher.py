"""Find pull requests that say they fix, close or resolve an issue."""

import re
from functools import lru_cache
from typing import Iterable, Tuple

from bouncer.models import Issue

# fix, fixes, fixed, close, closes, closed, resolve, resolves, resolved
_ACTION = r"\b(?:fix(?:es|ed)?|close[sd]?|resolve[sd]?):?\s+"


@lru_cache(maxsize=1024)
def _mention_patterns(issue_number: int, repo: str, web_url: str) -> Tuple[re.Pattern[str], re.Pattern[str]]:
    host = re.sub(r"^https?://", "", web_url.rstrip("/"))
    by_number = re.compile(_ACTION + rf"#{issue_number}(?!\d)", re.IGNORECASE)
    by_url = re.compile(
        _ACTION + r"https?://" + re.escape(f"{host}/{repo}/issues/{issue_number}") + r"(?!\d)",
        re.IGNORECASE,
    )
    return by_number, by_url


def is_issue_mentioned(
    text: str | None,
    issue_number: int,
    repo: str,
    web_url: str = "https://github.com",
) -> bool:
    """True if text contains a closing keyword followed by #N or the issue URL."""
    if not text:
        return False
    by_number, by_url = _mention_patterns(issue_number, repo, web_url)
    return bool(by_number.search(text) or by_url.search(text))


def has_related_pr(
    issue_number: int,
    pull_requests: Iterable[Issue],
    repo: str,
    web_url: str = "https://github.com",
) -> bool:
    """True if any PR body or PR comment references issue_number with a closing keyword."""
    for pr in pull_requests:
        if is_issue_mentioned(pr.body, issue_number, repo, web_url):
            return True
        if any(is_issue_mentioned(c.body, issue_number, repo, web_url) for c in pr.comments):
            return True
    return False
