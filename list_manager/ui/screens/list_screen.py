# list_manager/ui/screens/list_screen.py
"""
Main list screen: sortable table, pager and status bar
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

# Business layer
from list_manager.services.list_table_adapter import ListTableAdapter

# Domain models
from list_manager.models.pagination import PageResult, PageSpec
from list_manager.models.record import Record
from list_manager.models.sorting import SortSpec

# UI helpers
from list_manager.ui.controllers.status_bar import StatusBarController
from list_manager.utils.formatters import format_cell
from simple_logger import Slogger

# Widgets
from list_manager.ui.widgets.list_table import ListTable
from list_manager.ui.widgets.pagination import Pagination


class ListScreen(Screen):
    """Shows one sorted page of records at a time."""

    # reactive state
    current_page: int = reactive(1)
    total_pages: int = reactive(1)
    total_items: int = reactive(0)

    # ------------------------------------------------------------------ #

    def __init__(
        self,
        adapter: ListTableAdapter,
        config: Dict[str, Any],
        *,
        id: str = "list_screen",
    ) -> None:
        super().__init__(id=id)

        self.config = config
        self.adapter = adapter
        self.current_sort: SortSpec = adapter.current_sort
        self.selected_id: Optional[Any] = None

        # rows currently shown, in table order
        self.rows_data: List[Record] = []

    # ------------------------------------------------------------------ #
    # Compose & mount
    # ------------------------------------------------------------------ #

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Container(id="main-container"):
            with Vertical(id="content-area"):
                yield ListTable(id="records-table")
                yield Pagination(id="pagination")

        yield Static(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one(ListTable)
        table.styles.height = "1fr"

        self.status_controller = StatusBarController(self.query_one("#status-bar", Static))

        self.load_rows()

    # ------------------------------------------------------------------ #
    # Action handlers
    # ------------------------------------------------------------------ #

    def next_page(self) -> None:
        if self.current_page < self.total_pages:
            self.current_page += 1
            self.load_rows()

    def prev_page(self) -> None:
        if self.current_page > 1:
            self.current_page -= 1
            self.load_rows()

    def reverse_sort(self) -> None:
        self.current_sort = self.current_sort.reversed()
        self.current_page = 1
        self.load_rows()

    def sort_by(self, column_key: str) -> None:
        new_sort = self.adapter.toggle_sort(column_key, self.current_sort)
        if new_sort is None:
            self.notify(f"Column '{self.adapter.columns.label(column_key)}' is not sortable",
                        severity="warning", timeout=3)
            return
        self.current_sort = new_sort
        self.current_page = 1
        self.load_rows()

    # ------------------------------------------------------------------ #
    # Event handlers
    # ------------------------------------------------------------------ #

    def on_list_table_sort_requested(self, event: ListTable.SortRequested) -> None:
        self.sort_by(event.column_key)

    def on_list_table_row_selected(self, event: ListTable.RowSelected) -> None:
        row_index = event.row_key.value
        if row_index is not None and 0 <= row_index < len(self.rows_data):
            self.selected_id = self.adapter.row_id(self.rows_data[row_index])
            self.status_controller.update_with_selection(self.selected_id)

    def on_pagination_page_changed(self, event: Pagination.PageChanged) -> None:
        if self.current_page != event.page:
            self.current_page = event.page
            self.load_rows()

    # ------------------------------------------------------------------ #
    # Data helpers
    # ------------------------------------------------------------------ #

    def load_rows(self) -> PageResult:
        """Compute the current page and refresh the table widgets."""
        result = self.adapter.prepare_items(self.current_sort, PageSpec(self.current_page))
        self.current_sort = self.adapter.current_sort

        self.rows_data = list(result.rows)
        self.total_items = result.total_items
        self.total_pages = result.total_pages

        # -------- Table ----------
        table = self.query_one(ListTable)
        table.clear(columns=True)

        columns = self.adapter.columns
        visible = columns.visible()
        for key in visible:
            table.add_column(self._header_label(key), key=key)

        fmt = self.config.get("ui", {}).get("date_format", "%Y-%m-%d")
        for idx, record in enumerate(self.rows_data):
            table.add_row(
                *(format_cell(self.adapter.column_default(record, key), fmt) for key in visible),
                key=idx,
                label=str(self.adapter.row_id(record)),
            )

        # -------- Pagination -------
        self.query_one(Pagination).update_pages(
            self.current_page, self.total_pages, self.total_items
        )

        # -------- Status bar -------
        self.status_controller.update(result, self.current_sort, self.selected_id)

        Slogger.debug(
            "Rendered page",
            {"screen": "ListScreen", "page": self.current_page, "rows": len(self.rows_data)},
        )
        return result

    def _header_label(self, key: str) -> Text:
        columns = self.adapter.columns
        label = Text(columns.label(key))
        if columns.orderby_for(key) == self.current_sort.effective_field:
            label.append(" ▼" if self.current_sort.descending else " ▲", style="bold")
        elif columns.is_sortable(key):
            label.stylize("underline")
        return label
