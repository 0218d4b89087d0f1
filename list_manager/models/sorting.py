"""Sort request model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ASC = "asc"
DESC = "desc"
FALLBACK_FIELD = "id"

Direction = Literal["asc", "desc"]


@dataclass(frozen=True, slots=True)
class SortSpec:
    field: str = ""
    direction: str = ASC

    @property
    def effective_field(self) -> str:
        """The requested field, or `id` when blank."""
        field = (self.field or "").strip()
        return field or FALLBACK_FIELD

    @property
    def effective_direction(self) -> Direction:
        """`desc` only when exactly requested, otherwise `asc`."""
        return DESC if self.direction == DESC else ASC

    @property
    def descending(self) -> bool:
        return self.effective_direction == DESC

    def reversed(self) -> "SortSpec":
        return SortSpec(self.effective_field, ASC if self.descending else DESC)
