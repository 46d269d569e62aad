"""Controller layer: editor state machine, scene router and validation.

This package contains:
- validators: verify() and duplicate warnings for a Directory
- editor: Editor, the draft plus its row state
- router: SceneRouter, the Overview/Editor transition table
- sync: SceneSyncManager for router → UI updates (imported by the app)
- folder_events: FolderPickerEventsMixin (imported by the app)
"""

from controller.editor import Editor, EditorMode
from controller.router import EditorScene, OverviewScene, SceneRouter
from controller.validators import ValidationError, find_duplicates, verify

__all__ = [
    # Editor
    "Editor",
    "EditorMode",
    # Router
    "EditorScene",
    "OverviewScene",
    "SceneRouter",
    # Validation
    "ValidationError",
    "find_duplicates",
    "verify",
]
