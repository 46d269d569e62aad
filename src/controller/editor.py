"""Editor: the draft being edited plus its per-row UI state."""

from __future__ import annotations

import logging
from enum import Enum

from controller.messages import (
    BrowseFolder,
    BrowseSource,
    Cancel,
    CancelRequested,
    CommitRequested,
    DelExclude,
    DelSource,
    NewExclude,
    NewSource,
    Save,
    SetExclude,
    SetName,
    SetSource,
    SourcePicked,
)
from controller.validators import find_duplicates, verify
from model import Directory, ExcludeRowState, ItemList, PickerStatus, SourceRowState

log = logging.getLogger(__name__)


class EditorMode(Enum):
    EDITING = "editing"
    EDITING_WITH_ERROR = "editing_with_error"


class Editor:
    """Edits a disconnected copy of one Directory.

    Sources and excludes are ItemLists, so every value carries its own row
    state and the two can never drift apart.
    """

    def __init__(self, directory: Directory) -> None:
        self.name = directory.name
        self.sources: ItemList[str, SourceRowState] = ItemList(directory.sources, SourceRowState)
        self.excludes: ItemList[str, ExcludeRowState] = ItemList(directory.excludes, ExcludeRowState)
        self.error: str | None = None

    @property
    def mode(self) -> EditorMode:
        if self.error is None:
            return EditorMode.EDITING
        return EditorMode.EDITING_WITH_ERROR

    def draft(self) -> Directory:
        """Build a fresh Directory from the current rows."""
        return Directory(
            name=self.name,
            sources=self.sources.values(),
            excludes=self.excludes.values(),
        )

    def update(self, message) -> CommitRequested | CancelRequested | BrowseFolder | None:
        """Apply one editor message.

        Returns a request for the router (commit/cancel), a command for the
        UI (browse), or None.
        """
        if isinstance(message, Save):
            return self._save()
        if isinstance(message, Cancel):
            return CancelRequested()
        if isinstance(message, BrowseSource):
            index = self._resolve(self.sources, message)
            if index is None:
                return None
            token = self.sources[index].state.picker.request()
            if token is None:
                log.debug(f"Browse ignored, source {index} already has a pick pending")
                return None
            return BrowseFolder(token)
        if isinstance(message, SourcePicked):
            self._apply_pick(message.token, message.path)
            return None

        if isinstance(message, SetName):
            self.name = message.name
        elif isinstance(message, NewSource):
            self.sources.append("")
        elif isinstance(message, (SetSource, DelSource)):
            index = self._resolve(self.sources, message)
            if index is None:
                return None
            if isinstance(message, SetSource):
                self.sources.update_at(index, message.path)
            else:
                self.sources.remove_at(index)
        elif isinstance(message, NewExclude):
            self.excludes.append("")
        elif isinstance(message, (SetExclude, DelExclude)):
            index = self._resolve(self.excludes, message)
            if index is None:
                return None
            if isinstance(message, SetExclude):
                self.excludes.update_at(index, message.pattern)
            else:
                self.excludes.remove_at(index)
        else:
            log.debug(f"Editor ignoring {message!r}")
            return None
        # Any edit clears a previously shown error
        self.error = None
        return None

    def _resolve(self, items: ItemList, message) -> int | None:
        """Current index of the row a message addresses, or None if it is gone.

        Messages without a row are taken at their index; a bad index there is
        a caller bug and raises IndexOutOfRange.
        """
        if message.row is None:
            return message.index
        index = items.find(lambda row: row is message.row)
        if index is None:
            log.debug(f"Ignoring {type(message).__name__}, its row was removed")
        return index

    def _apply_pick(self, token: int, path: str | None) -> None:
        index = self.sources.find(lambda row: row.state.picker.token == token)
        if index is None:
            log.debug(f"Discarding folder reply for unknown token {token}")
            return
        outcome = self.sources[index].state.picker.complete(token, path)
        if outcome is PickerStatus.RESOLVED:
            self.sources.update_at(index, path)
            self.error = None

    def _save(self) -> CommitRequested | None:
        draft = self.draft()
        errors = verify(draft)
        if errors:
            self.error = errors[0].message
            return None
        return CommitRequested(draft, tuple(find_duplicates(draft)))
