"""SceneSyncManager: keeps the mounted widgets in step with the router."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual.containers import Container
from textual.css.query import NoMatches

from controller.messages import (
    BrowseSource,
    DeleteRequested,
    DelExclude,
    ExpandRequested,
    DelSource,
    NewExclude,
    NewSource,
    SourcePicked,
)
from controller.router import EditorScene, OverviewScene, Scene, SceneRouter
from ui.ids import css
import ui.ids as ids

if TYPE_CHECKING:
    from textual.app import App
    from textual.widget import Widget

log = logging.getLogger(__name__)

# Messages after which the source/exclude row widgets must be re-rendered
SOURCE_ROW_MESSAGES = (NewSource, DelSource, BrowseSource, SourcePicked)
EXCLUDE_ROW_MESSAGES = (NewExclude, DelExclude)


class SceneSyncManager:
    """Re-renders the parts of the UI a routed message may have changed.

    Value edits (typing in an input) are not re-rendered: the input already
    shows the new value.
    """

    def __init__(self, app: App, router: SceneRouter) -> None:
        self.app = app
        self.router = router

    def build_view(self) -> Widget:
        """Create the view widget for the active scene."""
        from ui.views import EditorView, OverviewView

        scene = self.router.scene
        if isinstance(scene, EditorScene):
            return EditorView(scene.editor, is_new=scene.is_new)
        return OverviewView(self.router.store.list(), expanded=scene.expanded)

    async def show_scene(self) -> None:
        """Replace the mounted view with one for the active scene."""
        try:
            container = self.app.query_one(css(ids.SCENE_CONTAINER), Container)
        except NoMatches:
            log.debug("Scene container not found")
            return
        await container.remove_children()
        await container.mount(self.build_view())

    async def sync(self, message, previous: Scene) -> None:
        """Bring the UI up to date after the router handled message.

        Args:
            message: The message that was routed
            previous: The scene that was active before routing
        """
        scene = self.router.scene
        if scene is not previous:
            await self.show_scene()
            return
        if isinstance(scene, OverviewScene):
            if isinstance(message, (DeleteRequested, ExpandRequested)):
                await self.show_scene()
            return
        await self._sync_editor(scene, message)

    async def _sync_editor(self, scene: EditorScene, message) -> None:
        from ui.views import EditorView

        try:
            view = self.app.query_one(css(ids.EDITOR_VIEW), EditorView)
        except NoMatches:
            log.debug("Editor view not found")
            return
        if isinstance(message, SOURCE_ROW_MESSAGES):
            focus = len(scene.editor.sources) - 1 if isinstance(message, NewSource) else None
            await view.rebuild_sources(focus)
        elif isinstance(message, EXCLUDE_ROW_MESSAGES):
            focus = len(scene.editor.excludes) - 1 if isinstance(message, NewExclude) else None
            await view.rebuild_excludes(focus)
        view.show_error()
