# list_manager/ui/controllers/status_bar.py
"""Formats and updates the status bar."""

from __future__ import annotations

from typing import Any, Optional

from textual.widgets import Static

from list_manager.models.pagination import PageResult
from list_manager.models.sorting import SortSpec


class StatusBarController:
    """Builds the human-readable status text and writes it to the bar."""

    def __init__(self, status_bar: Static) -> None:
        self._bar = status_bar
        self._base = ""

    @property
    def text(self) -> str:
        return self._base

    def update(
        self,
        result: PageResult,
        sort: SortSpec,
        selected_id: Optional[Any] = None,
    ) -> None:
        """Refresh the whole status line."""
        self._base = self.format(result, sort)
        self.update_with_selection(selected_id)

    def update_with_selection(self, selected_id: Optional[Any] = None) -> None:
        """Keep the left part untouched, change selection info."""
        text = self._base
        if selected_id is not None:
            text = f"{text} | Selected: {selected_id}"
        self._bar.update(text)

    @staticmethod
    def format(result: PageResult, sort: SortSpec) -> str:
        parts = [
            f"Items: {result.total_items}",
            f"Page: {result.page_number}/{result.total_pages}",
            f"Sort: {sort.effective_field} {sort.effective_direction}",
        ]
        return " | ".join(parts)
