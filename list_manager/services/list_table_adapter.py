# list_manager/services/list_table_adapter.py
"""
Glue between a table-rendering host and the paged/sorted view.

The host asks for items, pagination args and column headers; sorting and
slicing are delegated to `PagedSortedView`, display concerns to `ColumnSet`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

from list_manager.core.paged_sorted_view import PagedSortedView
from list_manager.core.request import page_spec_from_request, sort_spec_from_request
from list_manager.models.columns import ColumnSet, Sortable
from list_manager.models.pagination import PageResult, PageSpec
from list_manager.models.record import Record, field_value
from list_manager.models.sorting import ASC, DESC, FALLBACK_FIELD, SortSpec


class ListTableAdapter:
    """Prepares one page of a list table at a time."""

    def __init__(
        self,
        view: PagedSortedView,
        columns: ColumnSet,
        *,
        default_orderby: str = FALLBACK_FIELD,
        default_order: str = ASC,
    ) -> None:
        self._view = view
        self._columns = columns
        self._default_orderby = default_orderby
        self._default_order = default_order

        # state of the last prepared page
        self.items: List[Record] = []
        self.pagination_args: Dict[str, int] = {}
        self.column_headers: Tuple[Dict[str, str], List[str], Sortable] = columns.headers()
        self.current_sort = SortSpec(default_orderby, default_order)
        self.last_result: Optional[PageResult] = None

    @property
    def view(self) -> PagedSortedView:
        return self._view

    @property
    def columns(self) -> ColumnSet:
        return self._columns

    # ------------------------------------------------------------------ #
    # preparing pages
    # ------------------------------------------------------------------ #

    def prepare_items(
        self,
        sort: Optional[SortSpec] = None,
        page: Optional[PageSpec] = None,
    ) -> PageResult:
        """Compute a page and store items, pagination args and headers."""
        sort = sort or self.current_sort
        result = self._view.compute_page(sort, page or PageSpec())

        self.current_sort = SortSpec(sort.effective_field, sort.effective_direction)
        self.pagination_args = {
            "total_items": result.total_items,
            "per_page": result.page_size,
            "total_pages": result.total_pages,
        }
        self.column_headers = self._columns.headers()
        self.items = list(result.rows)
        self.last_result = result
        return result

    def prepare_from_request(self, params: Mapping[str, Any]) -> PageResult:
        """Same as `prepare_items`, reading orderby/order/paged from `params`."""
        sort = sort_spec_from_request(params, self._default_orderby, self._default_order)
        return self.prepare_items(sort, page_spec_from_request(params))

    def toggle_sort(self, key: str, current: Optional[SortSpec] = None) -> Optional[SortSpec]:
        """
        Sort spec to use after the header for `key` is activated

        A new column starts in its preferred direction; the column already
        sorted on flips. Returns None for columns that are not sortable.
        """
        orderby = self._columns.orderby_for(key)
        if orderby is None:
            return None
        current = current or self.current_sort
        if current.effective_field == orderby:
            return current.reversed()
        return SortSpec(orderby, DESC if self._columns.desc_first(key) else ASC)

    # ------------------------------------------------------------------ #
    # per-row display hooks
    # ------------------------------------------------------------------ #

    def column_default(self, record: Record, key: str) -> Any:
        return self._columns.column_default(record, key)

    @staticmethod
    def row_id(record: Record) -> Any:
        value = field_value(record, "id")
        return 0 if value is None else value

    def row_class(self, record: Record) -> str:
        return f"row-item-{self.row_id(record)}"
