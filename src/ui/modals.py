"""Modal dialog for choosing a folder."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Label, Static

from ui.ids import css
from ui.widgets import FilteredDirectoryTree
import ui.ids as ids

if TYPE_CHECKING:
    from textual.app import App

log = logging.getLogger(__name__)


class FolderPickerModal(ModalScreen[Path | None]):
    """Browse directories and return the chosen one, or None."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, start: Path) -> None:
        super().__init__()
        self._start = start
        self._selected: Path = start

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.FOLDER_PICKER_MODAL):
            yield Label("Choose Folder", id="modal-title")
            yield Static(str(self._selected), id=ids.FOLDER_SELECTED)
            yield FilteredDirectoryTree(self._start, id=ids.FOLDER_TREE)
            with Horizontal(id="modal-buttons"):
                yield Button("..", id=ids.FOLDER_PARENT_BTN)
                yield Button("Cancel", id=ids.FOLDER_CANCEL_BTN, variant="default")
                yield Button("Choose", id=ids.FOLDER_CHOOSE_BTN, variant="success")

    def on_mount(self) -> None:
        self.query_one(css(ids.FOLDER_TREE), FilteredDirectoryTree).focus()

    def _select(self, path: Path) -> None:
        self._selected = path
        self.query_one(css(ids.FOLDER_SELECTED), Static).update(str(path))

    @on(DirectoryTree.DirectorySelected)
    def on_directory_selected(self, event: DirectoryTree.DirectorySelected) -> None:
        event.stop()
        self._select(event.path)

    @on(Button.Pressed, css(ids.FOLDER_PARENT_BTN))
    def on_parent_pressed(self, event: Button.Pressed) -> None:
        tree = self.query_one(css(ids.FOLDER_TREE), FilteredDirectoryTree)
        parent = Path(tree.path).parent
        if parent != Path(tree.path):
            tree.path = parent
            self._select(parent)

    @on(Button.Pressed, css(ids.FOLDER_CHOOSE_BTN))
    def on_choose(self, event: Button.Pressed) -> None:
        self.dismiss(self._selected)

    @on(Button.Pressed, css(ids.FOLDER_CANCEL_BTN))
    def on_cancel(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class TreeFolderDialog:
    """Folder dialog backed by FolderPickerModal.

    choose_folder() must run inside a worker, it waits for the modal.
    """

    def __init__(self, start: Path | None = None) -> None:
        self.start = start

    async def choose_folder(self, app: App) -> str | None:
        start = self.start or Path.cwd()
        path = await app.push_screen_wait(FolderPickerModal(start))
        log.debug(f"Folder dialog returned {path}")
        return str(path) if path else None
