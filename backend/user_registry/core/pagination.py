"""Pagination — pure page-envelope arithmetic shared by every listing.

Invariants:
    - total_pages == ceil(total_items / size); 0 when there are no items
    - first page is index 0 regardless of total_items
    - last page holds when no page follows (page + 1 >= total_pages)
    - Out-of-range pages are legal: empty content, last == True
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PageInfo:
    """Position of one page inside a sorted scan."""
    page: int
    size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return compute_total_pages(self.total_items, self.size)

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return self.page + 1 >= self.total_pages


def compute_total_pages(total_items: int, size: int) -> int:
    if size <= 0:
        raise ValueError(f"Page size must be positive, got {size}")
    return -(-total_items // size)


def page_offset(page: int, size: int) -> int:
    """Row offset for a zero-based page index."""
    if page < 0:
        raise ValueError(f"Page index must not be negative, got {page}")
    return page * size
