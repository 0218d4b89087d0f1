"""Column metadata for a list table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from list_manager.errors import ConfigurationError
from list_manager.models.record import Record, field_value

# key -> (orderby field, whether the first click sorts descending)
Sortable = Dict[str, Tuple[str, bool]]

DEFAULT_SORTABLE: Sortable = {"title": ("title", False)}


@dataclass(slots=True)
class ColumnSet:
    """
    Ordered `key -> label` columns plus hidden and sortable metadata.

    The format of `columns` is ``{"internal-name": "Title"}``.
    """

    columns: Dict[str, str]
    hidden: List[str] = field(default_factory=list)
    sortable: Optional[Sortable] = None

    def __post_init__(self) -> None:
        if not self.columns:
            raise ConfigurationError("A list table needs at least one column")
        self.columns = dict(self.columns)
        self.hidden = list(self.hidden)
        if self.sortable is None:
            self.sortable = dict(DEFAULT_SORTABLE)
        else:
            self.sortable = {
                key: self._normalize_sortable(key, value)
                for key, value in self.sortable.items()
            }

    # ---------- constructors ----------
    @classmethod
    def from_records(
        cls,
        records: Iterable[Record],
        *,
        hidden: Iterable[str] = (),
    ) -> "ColumnSet":
        """Columns from the union of record keys, in first-seen order, all sortable."""
        columns: Dict[str, str] = {}
        for record in records:
            for key in record:
                if key not in columns:
                    columns[key] = label_for(key)
        if not columns:
            columns = {"id": label_for("id")}
        return cls(
            columns=columns,
            hidden=list(hidden),
            sortable={key: (key, False) for key in columns},
        )

    # ---------- queries ----------
    def keys(self) -> List[str]:
        return list(self.columns)

    def visible(self) -> List[str]:
        return [key for key in self.columns if key not in self.hidden]

    def label(self, key: str) -> str:
        return self.columns.get(key, key)

    def is_sortable(self, key: str) -> bool:
        return key in self.sortable

    def orderby_for(self, key: str) -> Optional[str]:
        entry = self.sortable.get(key)
        return entry[0] if entry else None

    def desc_first(self, key: str) -> bool:
        entry = self.sortable.get(key)
        return bool(entry and entry[1])

    def column_default(self, record: Record, key: str) -> Any:
        """Value to show for `key`; None for unknown columns or unset values."""
        if key not in self.columns:
            return None
        return field_value(record, key)

    def headers(self) -> Tuple[Dict[str, str], List[str], Sortable]:
        return dict(self.columns), list(self.hidden), dict(self.sortable)

    # internal
    @staticmethod
    def _normalize_sortable(key: str, value: Any) -> Tuple[str, bool]:
        if isinstance(value, str):
            return (value, False)
        if isinstance(value, (list, tuple)) and value:
            orderby = value[0]
            desc_first = bool(value[1]) if len(value) > 1 else False
            return (str(orderby), desc_first)
        raise ConfigurationError(f"Invalid sortable definition for column '{key}': {value!r}")


def label_for(key: str) -> str:
    """`posted_at` -> `Posted At`; `id` -> `ID`."""
    if key.lower() == "id":
        return "ID"
    return key.replace("_", " ").replace("-", " ").strip().title() or key
