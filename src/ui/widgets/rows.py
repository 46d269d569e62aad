"""Editable row widgets for sources and excludes.

Each item widget renders one Row of an ItemList. Messages carry the Row
itself, so an item removed after the message was posted is simply skipped.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.widgets import Button, Input

from controller.messages import BrowseSource, DelExclude, DelSource, SetExclude, SetSource
from ui.events import ActionRequested

if TYPE_CHECKING:
    from model import ExcludeRowState, ItemList, Row, SourceRowState

log = logging.getLogger(__name__)


class RowItem(Horizontal):
    """Base for one editable row with a text input."""

    INPUT_CLASS = "row-input"

    def __init__(self, index: int, row: Row) -> None:
        super().__init__(classes="row-item")
        self.index = index
        self.row = row

    def _input(self) -> Input | None:
        try:
            return self.query_one(f".{self.INPUT_CLASS}", Input)
        except NoMatches:
            return None

    def capture_state(self) -> None:
        """Copy input focus/cursor into the row state before a re-render."""
        text_input = self._input()
        if text_input is None:
            return
        self.row.state.input.focused = text_input.has_focus
        self.row.state.input.cursor_position = text_input.cursor_position

    def restore_state(self) -> None:
        """Apply the remembered focus/cursor to a freshly composed input."""
        text_input = self._input()
        if text_input is None:
            log.debug(f"Row {self.index} input not found for restore")
            return
        state = self.row.state.input
        text_input.cursor_position = min(state.cursor_position, len(text_input.value))
        if state.focused:
            text_input.focus()


class SourceRowItem(RowItem):
    """Source folder: editable path, browse button, remove button."""

    INPUT_CLASS = "source-input"

    row: Row[str, SourceRowState]

    def compose(self) -> ComposeResult:
        pending = self.row.state.picker.pending
        yield Input(
            value=self.row.value,
            placeholder="No folder selected",
            classes=self.INPUT_CLASS,
            select_on_focus=False,
        )
        yield Button("..." if pending else "Browse", classes="browse-btn", disabled=pending)
        yield Button("x", classes="remove-btn", variant="error")

    @on(Input.Changed, ".source-input")
    def on_path_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.value != self.row.value:
            self.post_message(ActionRequested(SetSource(self.index, event.value, row=self.row)))

    @on(Button.Pressed, ".browse-btn")
    def on_browse_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(ActionRequested(BrowseSource(self.index, row=self.row)))

    @on(Button.Pressed, ".remove-btn")
    def on_remove_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(ActionRequested(DelSource(self.index, row=self.row)))


class ExcludeRowItem(RowItem):
    """Exclude pattern: editable pattern and remove button."""

    INPUT_CLASS = "exclude-input"

    row: Row[str, ExcludeRowState]

    def compose(self) -> ComposeResult:
        yield Input(
            value=self.row.value,
            placeholder="Exclude pattern",
            classes=self.INPUT_CLASS,
            select_on_focus=False,
        )
        yield Button("x", classes="remove-btn", variant="error")

    @on(Input.Changed, ".exclude-input")
    def on_pattern_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.value != self.row.value:
            self.post_message(ActionRequested(SetExclude(self.index, event.value, row=self.row)))

    @on(Button.Pressed, ".remove-btn")
    def on_remove_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(ActionRequested(DelExclude(self.index, row=self.row)))


class RowList(Vertical):
    """Renders every row of an ItemList with item_class."""

    item_class: type[RowItem] = RowItem

    def __init__(self, rows: ItemList, id: str | None = None) -> None:
        super().__init__(id=id)
        self.rows = rows

    def compose(self) -> ComposeResult:
        for index, row in enumerate(self.rows):
            yield self.item_class(index, row)

    async def rebuild(self, focus_index: int | None = None) -> None:
        """Re-render after rows were added, removed or changed elsewhere.

        Args:
            focus_index: Row to focus afterwards instead of the previous one
        """
        for item in self.query(self.item_class):
            item.capture_state()
        if focus_index is not None:
            for index, row in enumerate(self.rows):
                row.state.input.focused = index == focus_index
        await self.recompose()
        for item in self.query(self.item_class):
            item.restore_state()


class SourceList(RowList):
    item_class = SourceRowItem


class ExcludeList(RowList):
    item_class = ExcludeRowItem
