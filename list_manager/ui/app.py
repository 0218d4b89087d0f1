"""
Main Textual application class for the List Manager
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from simple_logger import Slogger

from textual.app import App
from textual.binding import Binding

from list_manager.di import build_container, Container
from list_manager.models.columns import ColumnSet
from list_manager.models.record import Record
from list_manager.ui.screens.list_screen import ListScreen


class ListManagerApp(App):
    """Browse a list of records one sorted page at a time."""

    CSS = """
    #main-container {
        height: 1fr;
    }

    #content-area {
        height: 1fr;
    }

    #status-bar {
        height: 1;
        background: $boost;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("n", "next_page", "Next Page", show=True),
        Binding("p", "prev_page", "Prev Page", show=True),
        Binding("r", "reverse_sort", "Reverse Sort", show=True),
    ]

    # ------------------------------------------------------------------ #
    # init / mount
    # ------------------------------------------------------------------ #

    def __init__(
        self,
        config: Dict[str, Any],
        records: List[Record],
        columns: Optional[ColumnSet] = None,
    ) -> None:
        super().__init__()
        self.config = config
        self.container: Container = build_container(config, records, columns)

    def on_mount(self) -> None:
        """Push the main list screen."""
        Slogger.info("Opening ListScreen", {"records": self.container.view.total_items})
        self.push_screen(
            ListScreen(
                adapter=self.container.adapter,
                config=self.config,
                id="list_screen",
            )
        )

    # ------------------------------------------------------------------ #
    # key-binding actions
    # ------------------------------------------------------------------ #

    def action_next_page(self) -> None:
        if hasattr(self.screen, "next_page"):
            self.screen.next_page()

    def action_prev_page(self) -> None:
        if hasattr(self.screen, "prev_page"):
            self.screen.prev_page()

    def action_reverse_sort(self) -> None:
        if hasattr(self.screen, "reverse_sort"):
            self.screen.reverse_sort()
