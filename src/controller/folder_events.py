"""Folder picker event handlers."""

from __future__ import annotations

import logging
from typing import Any, Callable

from controller.messages import BrowseFolder

log = logging.getLogger(__name__)


class FolderPickerEventsMixin:
    """Mixin that runs the folder dialog without blocking the app.

    The dialog runs in a worker; its answer comes back as a FolderChosen
    message and is routed like any other message.
    """

    # Expected from App class
    folder_dialog: Any
    run_worker: Callable
    post_message: Callable

    def _start_folder_pick(self, command: BrowseFolder) -> None:
        """Open the folder dialog for the pick identified by command.token."""
        self.run_worker(
            self._choose_folder(command.token),
            name=f"folder-pick-{command.token}",
            group="folder-picker",
        )

    async def _choose_folder(self, token: int) -> None:
        from ui.events import FolderChosen

        try:
            path = await self.folder_dialog.choose_folder(self)
        except OSError as e:
            log.error(f"Folder dialog failed: {e}")
            path = None
        self.post_message(FolderChosen(token, path))
