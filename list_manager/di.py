# list_manager/di.py
"""
Very small dependency-injection helper.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from list_manager.config import DEFAULT_ORDERBY, normalize_order
from list_manager.core.paged_sorted_view import PagedSortedView
from list_manager.models.columns import ColumnSet
from list_manager.models.record import Record
from list_manager.services.list_table_adapter import ListTableAdapter


class Container:
    """Holds lazily-created singletons."""

    def __init__(
        self,
        config: Dict[str, Any],
        records: List[Record],
        columns: Optional[ColumnSet] = None,
    ) -> None:
        self._cfg = config
        self._records = records
        self._columns: ColumnSet | None = columns
        self._view: PagedSortedView | None = None
        self._adapter: ListTableAdapter | None = None

    @property
    def table_config(self) -> Dict[str, Any]:
        return self._cfg.get("table", {})

    # ---------- models ----------
    @property
    def columns(self) -> ColumnSet:
        if self._columns is None:
            configured = self.table_config.get("columns")
            if configured:
                self._columns = ColumnSet(
                    columns=configured,
                    hidden=self.table_config.get("hidden", []),
                    sortable=self.table_config.get("sortable")
                    or {key: (key, False) for key in configured},
                )
            else:
                self._columns = ColumnSet.from_records(
                    self._records,
                    hidden=self.table_config.get("hidden", []),
                )
        return self._columns

    # ---------- core ----------
    @property
    def view(self) -> PagedSortedView:
        if self._view is None:
            self._view = PagedSortedView(self._records, self.table_config)
        return self._view

    # ---------- services ----------
    @property
    def adapter(self) -> ListTableAdapter:
        if self._adapter is None:
            self._adapter = ListTableAdapter(
                self.view,
                self.columns,
                default_orderby=self.table_config.get("orderby") or DEFAULT_ORDERBY,
                default_order=normalize_order(self.table_config.get("order")),
            )
        return self._adapter


# convenience factory
def build_container(
    config: Dict[str, Any],
    records: List[Record],
    columns: Optional[ColumnSet] = None,
) -> Container:
    """Create a container for the given config and records."""
    return Container(config, records, columns)
