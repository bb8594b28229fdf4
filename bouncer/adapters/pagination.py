"""Follow "next page" links until exhausted."""

from dataclasses import dataclass, field
from typing import Any, List, Protocol


@dataclass
class Page:
    """One page of a paginated list response."""

    items: List[Any] = field(default_factory=list)
    next_url: str | None = None


class PageProvider(Protocol):
    """Anything that can tell whether a page has a successor and fetch it."""

    def has_next_page(self, page: Page) -> bool: ...

    def get_next_page(self, page: Page) -> Page: ...


def concat_pages(first_page: Page, provider: PageProvider) -> List[Any]:
    """Concatenate items of first_page and every following page, in order.

    Fetch errors from intermediate pages propagate; there is no retry.
    """
    items: List[Any] = list(first_page.items)
    page = first_page
    while provider.has_next_page(page):
        page = provider.get_next_page(page)
        items.extend(page.items)
    return items
