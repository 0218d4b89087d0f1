"""Simple List Manager: sorted, paginated views over in-memory records."""

from list_manager.core.paged_sorted_view import PagedSortedView
from list_manager.errors import (
    ConfigurationError,
    ListManagerError,
    MissingFieldError,
    RecordsFileError,
)
from list_manager.models import ColumnSet, PageResult, PageSpec, SortSpec
from list_manager.services.list_table_adapter import ListTableAdapter

__version__ = "0.3.0"

__all__ = [
    "ColumnSet",
    "ConfigurationError",
    "ListManagerError",
    "ListTableAdapter",
    "MissingFieldError",
    "PageResult",
    "PageSpec",
    "PagedSortedView",
    "RecordsFileError",
    "SortSpec",
]
