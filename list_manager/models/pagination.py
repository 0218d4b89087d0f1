"""Page request and page-of-rows containers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence


@dataclass(frozen=True, slots=True)
class PageSpec:
    """Requested page. `page_size=None` means "use the view's page size"."""

    page_number: int = 1
    page_size: Optional[int] = None


@dataclass(frozen=True, slots=True)
class PageResult:
    """A single page of rows plus meta-data."""

    rows: Sequence[Mapping[str, Any]]
    total_items: int     # total records in the whole result set
    page_size: int       # size of each page
    page_number: int = 1 # current page index (1-based)
    total_pages: int = 1 # total number of pages

    # ------------- helpers -------------
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    def has_prev(self) -> bool:
        return self.page_number > 1

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size


def count_pages(total_items: int, page_size: int) -> int:
    """Number of pages needed for `total_items`; never less than one."""
    return max(1, (total_items + page_size - 1) // page_size)
