# list_manager/ui/console.py

"""
Rich rendering of a single page for non-interactive output.
"""

from typing import Optional

from rich.console import Console
from rich.table import Table

from list_manager.models.columns import ColumnSet
from list_manager.models.pagination import PageResult
from list_manager.models.sorting import SortSpec
from list_manager.utils.formatters import format_cell


def render_page(
    result: PageResult,
    columns: ColumnSet,
    sort: Optional[SortSpec] = None,
    date_format: str = "%Y-%m-%d",
) -> Table:
    """Build a rich Table for one page of records."""
    caption = f"Page {result.page_number} of {result.total_pages} | {result.total_items} items"
    table = Table(caption=caption, show_lines=False)

    visible = columns.visible()
    for key in visible:
        header = columns.label(key)
        if sort is not None and columns.orderby_for(key) == sort.effective_field:
            header += " ▼" if sort.descending else " ▲"
        table.add_column(header, style="cyan" if key == "id" else None)

    for record in result.rows:
        table.add_row(*(format_cell(columns.column_default(record, key), date_format) for key in visible))

    return table


def print_page(
    result: PageResult,
    columns: ColumnSet,
    sort: Optional[SortSpec] = None,
    console: Optional[Console] = None,
    date_format: str = "%Y-%m-%d",
) -> None:
    console = console or Console()
    console.print(render_page(result, columns, sort, date_format))
