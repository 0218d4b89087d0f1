# list_manager/core/paged_sorted_view.py
"""
Sorted, paginated view over an in-memory list of records.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from list_manager.config import DEFAULT_PER_PAGE, resolve_page_size
from list_manager.errors import MissingFieldError
from list_manager.models.pagination import PageResult, PageSpec, count_pages
from list_manager.models.record import Record, coerce_to_text, record_value
from list_manager.models.sorting import SortSpec
from simple_logger import Slogger


class PagedSortedView:
    """
    Owns a copy of a result set and hands out sorted pages of it.

    The view is not thread-safe: give each concurrent caller its own
    instance or serialise calls.
    """

    def __init__(
        self,
        records: Iterable[Record],
        config: Optional[Mapping[str, Any]] = None,
    ) -> None:
        config = config or {}
        raw_size = config.get("per_page", config.get("page_size"))
        self._per_page = resolve_page_size(raw_size, DEFAULT_PER_PAGE)
        self._results: List[Record] = list(records)

    # ------------------------------------------------------------------ #
    # read-only state
    # ------------------------------------------------------------------ #

    @property
    def page_size(self) -> int:
        return self._per_page

    @property
    def total_items(self) -> int:
        return len(self._results)

    @property
    def records(self) -> Tuple[Record, ...]:
        """Snapshot of the result set in its current order."""
        return tuple(self._results)

    def total_pages(self, page_size: Optional[int] = None) -> int:
        return count_pages(self.total_items, self._page_size_for(page_size))

    # ------------------------------------------------------------------ #
    # paging
    # ------------------------------------------------------------------ #

    def compute_page(
        self,
        sort: Optional[SortSpec] = None,
        page: Optional[PageSpec] = None,
    ) -> PageResult:
        """
        Sort the whole result set and return one page of it.

        Records are compared by the string form of the sort field, so
        numeric-looking values order lexicographically ("10" < "2").
        A page past the end yields no rows.
        """
        sort = sort or SortSpec()
        page = page or PageSpec()

        field = sort.effective_field
        self._sort(field, sort.descending)

        total_items = len(self._results)
        page_size = self._page_size_for(page.page_size)
        page_number = max(1, page.page_number or 1)

        offset = (page_number - 1) * page_size
        rows = self._results[offset:offset + page_size] if offset < total_items else []

        Slogger.debug(
            "Computed page",
            {
                "orderby": field,
                "order": sort.effective_direction,
                "page": page_number,
                "per_page": page_size,
                "rows": len(rows),
                "total_items": total_items,
            },
        )

        return PageResult(
            rows=rows,
            total_items=total_items,
            page_size=page_size,
            page_number=page_number,
            total_pages=count_pages(total_items, page_size),
        )

    # ------------------------------------------------------------------ #
    # helpers
    # ------------------------------------------------------------------ #

    def _page_size_for(self, requested: Optional[int]) -> int:
        if isinstance(requested, int) and not isinstance(requested, bool) and requested > 0:
            return requested
        return self._per_page

    def _sort(self, field: str, descending: bool) -> None:
        missing: Dict[str, int] = {"count": 0}

        def sort_key(record: Record) -> str:
            try:
                return coerce_to_text(record_value(record, field))
            except MissingFieldError:
                missing["count"] += 1
                return ""

        # list.sort is stable in both directions; code point order of str
        # matches byte order of the UTF-8 encoding.
        self._results.sort(key=sort_key, reverse=descending)

        if missing["count"]:
            Slogger.warning(
                f"Sort field '{field}' missing from {missing['count']} record(s); sorted as empty",
                {"orderby": field, "total_items": len(self._results)},
            )
