"""List Manager data models."""

from list_manager.models.columns import ColumnSet
from list_manager.models.pagination import PageResult, PageSpec
from list_manager.models.record import Record, coerce_to_text, field_value, record_value
from list_manager.models.sorting import SortSpec

__all__ = [
    "ColumnSet",
    "PageResult",
    "PageSpec",
    "Record",
    "SortSpec",
    "coerce_to_text",
    "field_value",
    "record_value",
]
