"""
Fixed-size pagination over an already filtered and sorted list.

`paginate` is a pure slice; `PageCursor` holds the current page for a
listing and ignores navigation outside the valid range.
"""
import math
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    page_size: int
    total: int
    total_pages: int
    start_index: int

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def showing_from(self) -> int:
        return self.start_index + 1 if self.items else 0

    @property
    def showing_to(self) -> int:
        return min(self.start_index + self.page_size, self.total) if self.items else 0


def total_pages(count: int, page_size: int) -> int:
    """Number of pages needed for `count` items (0 items -> 0 pages)."""
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    return math.ceil(count / page_size)


def paginate(items: Sequence[T], page_size: int, page: int) -> Page[T]:
    """Return page `page` (1-based) of `items`, clipped to what's available."""
    pages = total_pages(len(items), page_size)
    start_index = (page - 1) * page_size
    if start_index < 0:
        chunk: list[T] = []
    else:
        chunk = list(items[start_index:start_index + page_size])
    return Page(
        items=chunk,
        page=page,
        page_size=page_size,
        total=len(items),
        total_pages=pages,
        start_index=start_index,
    )


def page_links(current: int, pages: int) -> list[Optional[int]]:
    """
    Page numbers to render for a pagination bar.

    Always shows the first and last page, the current page and its direct
    neighbours. Each run of hidden pages collapses into a single None
    (rendered as a non-clickable "...").
    """
    visible = {1, pages, current - 1, current, current + 1}
    links: list[Optional[int]] = []
    for number in range(1, pages + 1):
        if number in visible:
            links.append(number)
        elif links and links[-1] is not None:
            links.append(None)
    return links


class PageCursor:
    """Current page of a listing."""

    def __init__(self, page: int = 1):
        self.page = page

    def go_to(self, page: int, pages: int) -> int:
        """Move to `page`; requests outside 1..pages are ignored."""
        if 1 <= page <= pages:
            self.page = page
        return self.page

    def next(self, pages: int) -> int:
        return self.go_to(self.page + 1, pages)

    def previous(self, pages: int) -> int:
        return self.go_to(self.page - 1, pages)

    def reset(self) -> int:
        """Back to the first page; called when sort or filters change."""
        self.page = 1
        return self.page
