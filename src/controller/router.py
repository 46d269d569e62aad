"""SceneRouter: which scene is active, and the transitions between them."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from controller.editor import Editor
from controller.messages import (
    EDITOR_MESSAGES,
    BrowseFolder,
    CancelRequested,
    CommitRequested,
    DeleteRequested,
    EditRequested,
    ExpandRequested,
    NewRequested,
)
from controller.validators import verify
from model import Directory, DirectoryStore

log = logging.getLogger(__name__)


@dataclass
class OverviewScene:
    """Read-only list of the store.

    expanded is the index of the entry showing its sources and excludes.
    """

    expanded: int | None = None


@dataclass
class EditorScene:
    """Editing one directory.

    original is the store entry the draft was cloned from, or None when
    creating a new directory. index is where it was at the time.
    """

    editor: Editor
    original: Directory | None = None
    index: int | None = None

    @property
    def is_new(self) -> bool:
        return self.original is None


Scene = OverviewScene | EditorScene


class SceneRouter:
    """Owns the active scene and the only transition table.

    Messages that do not belong to the active scene are ignored.
    """

    def __init__(self, store: DirectoryStore) -> None:
        self.store = store
        self.scene: Scene = OverviewScene()
        self.last_commit: CommitRequested | None = None

    @property
    def editor(self) -> Editor | None:
        if isinstance(self.scene, EditorScene):
            return self.scene.editor
        return None

    def dispatch(self, message) -> BrowseFolder | None:
        """Process one message to completion.

        Returns a BrowseFolder command when the UI has to open the folder
        dialog, otherwise None.
        """
        if isinstance(self.scene, OverviewScene):
            self._handle_overview(message)
            return None

        if isinstance(message, CommitRequested):
            self._commit(message)
            return None
        if isinstance(message, CancelRequested):
            self._cancel()
            return None
        if not isinstance(message, EDITOR_MESSAGES):
            log.debug(f"Ignoring {message!r} in editor")
            return None

        result = self.scene.editor.update(message)
        if isinstance(result, CommitRequested):
            self._commit(result)
            return None
        if isinstance(result, CancelRequested):
            self._cancel()
            return None
        return result

    def _handle_overview(self, message) -> None:
        if isinstance(message, NewRequested):
            self.scene = EditorScene(Editor(Directory()))
            log.info("Creating new directory")
            return
        if not isinstance(message, (EditRequested, DeleteRequested, ExpandRequested)):
            log.debug(f"Ignoring {message!r} in overview")
            return

        index = self._resolve(message)
        if index is None:
            return
        if isinstance(message, EditRequested):
            original = self.store.get(index)
            self.scene = EditorScene(Editor(original.clone()), original, index)
            log.info(f"Editing directory {index}: {original.name}")
        elif isinstance(message, DeleteRequested):
            removed = self.store.delete(index)
            self.scene.expanded = None
            log.info(f"Deleted directory {index}: {removed.name}")
        else:
            self.store.get(index)  # raises for a bad index
            self.scene.expanded = None if self.scene.expanded == index else index

    def _resolve(self, message) -> int | None:
        """Current store index of the entry a message addresses, or None if it is gone."""
        if message.target is None:
            return message.index
        index = self.store.index_of(message.target)
        if index is None:
            log.debug(f"Ignoring {type(message).__name__}, its directory was removed")
        return index

    def _commit(self, request: CommitRequested) -> None:
        scene = self.scene
        # Drafts are re-verified before they reach the store
        errors = verify(request.draft)
        if errors:
            scene.editor.error = errors[0].message
            log.error(f"Commit rejected for invalid draft: {errors[0].message}")
            return

        draft = request.draft.clone()
        if scene.is_new:
            index = self.store.append(draft)
        else:
            index = self.store.index_of(scene.original)
            if index is None:
                log.warning(f"Directory '{scene.original.name}' vanished while editing, appending")
                index = self.store.append(draft)
            else:
                self.store.replace(index, draft)
        for warning in request.warnings:
            log.warning(f"{draft.name}: {warning}")
        log.info(f"Committed directory {index}: {draft.name}")
        self.last_commit = request
        self.scene = OverviewScene()

    def _cancel(self) -> None:
        log.info("Edit cancelled")
        self.scene = OverviewScene()
