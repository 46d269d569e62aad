"""Editor scene: form for one directory draft."""

from __future__ import annotations

import logging

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Button, Input, Label, Static

from controller.editor import Editor
from controller.messages import Cancel, NewExclude, NewSource, Save, SetName
from ui.events import ActionRequested
from ui.ids import css
from ui.widgets import ExcludeList, SourceList
import ui.ids as ids

log = logging.getLogger(__name__)


class EditorView(VerticalScroll):
    """Name, sources and excludes of the draft, with Save/Cancel."""

    def __init__(self, editor: Editor, is_new: bool = False) -> None:
        super().__init__(id=ids.EDITOR_VIEW)
        self.editor = editor
        self.is_new = is_new

    def compose(self) -> ComposeResult:
        yield Label("New Directory" if self.is_new else "Edit Directory", id=ids.EDITOR_TITLE)
        with Horizontal(id=ids.NAME_ROW):
            yield Label("Name", classes="field-label")
            yield Input(value=self.editor.name, placeholder="Name", id=ids.NAME_INPUT)

        with Horizontal(classes="section-header"):
            yield Label("Sources", classes="section-label")
            yield Button("+", id=ids.NEW_SOURCE_BTN, variant="success")
        yield SourceList(self.editor.sources, id=ids.SOURCES_LIST)

        with Horizontal(classes="section-header"):
            yield Label("Excludes", classes="section-label")
            yield Button("+", id=ids.NEW_EXCLUDE_BTN, variant="success")
        yield ExcludeList(self.editor.excludes, id=ids.EXCLUDES_LIST)

        yield Static(self.editor.error or "", id=ids.EDITOR_ERROR)
        with Horizontal(id=ids.EDITOR_BUTTONS):
            yield Button("Cancel [Esc]", id=ids.CANCEL_BTN, variant="default")
            yield Button("Save [Ctrl+S]", id=ids.SAVE_BTN, variant="primary")

    def on_mount(self) -> None:
        self.query_one(css(ids.NAME_INPUT), Input).focus()

    def show_error(self) -> None:
        """Show the editor's current error, or clear it."""
        try:
            label = self.query_one(css(ids.EDITOR_ERROR), Static)
        except NoMatches:
            log.debug("Editor error label not found")
            return
        label.update(self.editor.error or "")

    async def rebuild_sources(self, focus_index: int | None = None) -> None:
        await self.query_one(css(ids.SOURCES_LIST), SourceList).rebuild(focus_index)

    async def rebuild_excludes(self, focus_index: int | None = None) -> None:
        await self.query_one(css(ids.EXCLUDES_LIST), ExcludeList).rebuild(focus_index)

    @on(Input.Changed, css(ids.NAME_INPUT))
    def on_name_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.value != self.editor.name:
            self.post_message(ActionRequested(SetName(event.value)))

    @on(Button.Pressed, css(ids.NEW_SOURCE_BTN))
    def on_new_source_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(ActionRequested(NewSource()))

    @on(Button.Pressed, css(ids.NEW_EXCLUDE_BTN))
    def on_new_exclude_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(ActionRequested(NewExclude()))

    @on(Button.Pressed, css(ids.SAVE_BTN))
    def on_save_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(ActionRequested(Save()))

    @on(Button.Pressed, css(ids.CANCEL_BTN))
    def on_cancel_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(ActionRequested(Cancel()))
