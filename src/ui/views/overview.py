"""Overview scene: the list of configured directories."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Label, Static

from controller.messages import NewRequested
from model import Directory
from ui.events import ActionRequested
from ui.ids import css
from ui.widgets import DirectoryListItem
import ui.ids as ids


class OverviewView(Vertical):
    """Read-only list of directories with expand/edit/delete per row."""

    def __init__(self, directories: list[Directory], expanded: int | None = None) -> None:
        super().__init__(id=ids.OVERVIEW_VIEW)
        self.directories = directories
        self.expanded = expanded

    def compose(self) -> ComposeResult:
        with Horizontal(id=ids.OVERVIEW_HEADER):
            yield Label("Directories", classes="section-label")
            yield Button("New [n]", id=ids.NEW_DIR_BTN, variant="primary")
        if not self.directories:
            yield Static("No directories yet. Press New to add one.", id=ids.EMPTY_HINT)
        items = [
            DirectoryListItem(i, d, expanded=i == self.expanded)
            for i, d in enumerate(self.directories)
        ]
        yield VerticalScroll(*items, id=ids.DIRECTORY_LIST)

    def on_mount(self) -> None:
        items = list(self.query(DirectoryListItem))
        if not items:
            self.query_one(css(ids.NEW_DIR_BTN), Button).focus()
        elif self.expanded is not None and self.expanded < len(items):
            items[self.expanded].query_one(".expand-btn", Button).focus()
        else:
            items[0].query_one(".edit-btn", Button).focus()

    @on(Button.Pressed, css(ids.NEW_DIR_BTN))
    def on_new_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(ActionRequested(NewRequested()))
