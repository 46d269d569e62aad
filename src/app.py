"""Main TUI application for bup."""

import logging
import os
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.css.query import NoMatches
from textual.widgets import Label, Static

from controller import EditorScene, SceneRouter
from controller.folder_events import FolderPickerEventsMixin
from controller.messages import Cancel, NewRequested, Save, SourcePicked
from controller.sync import SceneSyncManager
from model import DirectoryStore
from ui.events import ActionRequested, FolderChosen
from ui.ids import css
from ui.modals import TreeFolderDialog
import ui.ids as ids

# Set up logging to XDG state directory
def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "bup"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "bup.log"

logging.basicConfig(
    filename=str(_get_log_path()),
    level=logging.DEBUG,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)

# Load CSS from file
APP_CSS = (Path(__file__).parent / "ui" / "styles.tcss").read_text()


class BupApp(FolderPickerEventsMixin, App):
    """TUI for editing backup directories."""

    TITLE = "Bup"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("n", "new_directory", "New", show=True),
        Binding("ctrl+s", "save", "Save", show=True),
        Binding("escape", "cancel", "Cancel", show=True),
    ]

    def __init__(self, store: DirectoryStore, folder_dialog=None) -> None:
        super().__init__()
        self.store = store
        self.router = SceneRouter(store)
        self.folder_dialog = folder_dialog or TreeFolderDialog()
        self._sync_manager = SceneSyncManager(self, self.router)

    def compose(self) -> ComposeResult:
        yield Horizontal(
            Label("bup - backup directories", id=ids.HEADER_TITLE),
            id=ids.HEADER_CONTAINER,
        )
        yield Container(self._sync_manager.build_view(), id=ids.SCENE_CONTAINER)
        yield Static("", id=ids.STATUS_BAR)

    # =========================================================================
    # Status
    # =========================================================================

    def _set_status(self, message: str) -> None:
        """Set status bar message."""
        try:
            status = self.query_one(css(ids.STATUS_BAR), Static)
            status.update(message)
        except NoMatches:
            log.debug("Status bar not found")

    # =========================================================================
    # Routing
    # =========================================================================

    async def route(self, message) -> None:
        """Send one message through the router and update the UI."""
        previous = self.router.scene
        previous_commit = self.router.last_commit
        before = self.store.list()

        command = self.router.dispatch(message)
        if command is not None:
            self._start_folder_pick(command)

        await self._sync_manager.sync(message, previous)

        commit = self.router.last_commit
        if commit is not None and commit is not previous_commit:
            status = f"Saved: {commit.draft.name}"
            if commit.warnings:
                status += " (" + "; ".join(commit.warnings) + ")"
            self._set_status(status)
        elif len(self.store) < len(before):
            removed = [d for d in before if self.store.index_of(d) is None]
            self._set_status(f"Removed: {removed[0].name}")
        elif isinstance(previous, EditorScene) and self.router.scene is not previous:
            self._set_status("Edit cancelled")

    async def on_action_requested(self, event: ActionRequested) -> None:
        """Route an action posted by a widget."""
        event.stop()
        await self.route(event.action)

    async def on_folder_chosen(self, event: FolderChosen) -> None:
        """Route the folder dialog's answer back to the editor."""
        await self.route(SourcePicked(event.token, event.path))

    # =========================================================================
    # Actions
    # =========================================================================

    async def action_new_directory(self) -> None:
        await self.route(NewRequested())

    async def action_save(self) -> None:
        await self.route(Save())

    async def action_cancel(self) -> None:
        await self.route(Cancel())
