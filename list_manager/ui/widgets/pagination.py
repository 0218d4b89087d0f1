"""
Pagination widget for navigating through pages of records
"""

from typing import Optional

from textual.containers import Container
from textual.reactive import reactive
from textual.widgets import Button, Label
from textual.message import Message


class Pagination(Container):
    """
    Pagination widget with first, prev, next, last buttons
    """

    DEFAULT_CSS = """
    Pagination {
        layout: horizontal;
        height: 3;
        content-align: center middle;
    }

    Pagination > Button {
        min-width: 5;
        margin: 0 1;
    }

    Pagination > #page-indicator {
        min-width: 24;
        content-align: center middle;
    }
    """

    current_page = reactive(1)
    total_pages = reactive(1)

    class PageChanged(Message):
        """Page changed message"""
        def __init__(self, page: int) -> None:
            super().__init__()
            self.page = page

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._total_items = 0

    def compose(self):
        """Create child widgets"""
        yield Button("« First", id="first-page", classes="page-button")
        yield Button("< Prev", id="prev-page", classes="page-button")
        yield Label("Page [b]1[/b] of [b]1[/b]", id="page-indicator", classes="page-indicator")
        yield Button("Next >", id="next-page", classes="page-button")
        yield Button("Last »", id="last-page", classes="page-button")

    def update_pages(self, current: int, total: int, total_items: Optional[int] = None) -> None:
        """
        Update pagination with new page information

        `current` may lie past `total`; the page is then simply empty.
        """
        if total_items is not None:
            self._total_items = total_items
        self.current_page = current
        self.total_pages = total
        self._refresh_controls()

    def _refresh_controls(self) -> None:
        if not self.is_mounted:
            return
        current, total = self.current_page, self.total_pages

        indicator = self.query_one("#page-indicator", Label)
        indicator.update(
            f"Page [b]{current}[/b] of [b]{total}[/b] ({self._total_items} items)"
        )

        first_btn = self.query_one("#first-page", Button)
        prev_btn = self.query_one("#prev-page", Button)
        next_btn = self.query_one("#next-page", Button)
        last_btn = self.query_one("#last-page", Button)

        first_btn.disabled = prev_btn.disabled = (current <= 1)
        next_btn.disabled = (current >= total)
        last_btn.disabled = (current == total)

    def on_mount(self) -> None:
        self._refresh_controls()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle pagination button presses"""
        button_id = event.button.id
        new_page = self.current_page

        if button_id == "first-page":
            new_page = 1
        elif button_id == "last-page":
            new_page = self.total_pages
        elif button_id == "prev-page" and self.current_page > 1:
            new_page = self.current_page - 1
        elif button_id == "next-page" and self.current_page < self.total_pages:
            new_page = self.current_page + 1

        if new_page != self.current_page:
            self.update_pages(new_page, self.total_pages)
            self.post_message(self.PageChanged(new_page))
