"""
Custom DataTable widget for displaying one page of records
"""

from typing import Any, Optional

from textual.widgets import DataTable
from textual.message import Message


class ListTable(DataTable):
    """
    DataTable with row selection and sortable column headers
    """

    class RowSelected(Message):
        """Row selected message"""
        def __init__(self, row_key) -> None:
            super().__init__()
            self.row_key = row_key

    class SortRequested(Message):
        """A column header was clicked"""
        def __init__(self, column_key: Any) -> None:
            super().__init__()
            self.column_key = column_key

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        """
        Initialize the ListTable

        Args:
            id: Optional widget ID
            classes: Optional CSS classes
        """
        super().__init__(id=id, classes=classes)
        self.cursor_type = "row"
        self.zebra_stripes = True

    def on_mount(self) -> None:
        """Set up the widget when mounted"""
        self.add_class("list-table")

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Forward the event with our own message type"""
        event.stop()
        self.post_message(self.RowSelected(event.row_key))

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        """Turn a header click into a sort request"""
        event.stop()
        self.post_message(self.SortRequested(event.column_key.value))
