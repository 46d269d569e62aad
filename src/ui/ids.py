"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"

# Container IDs
HEADER_CONTAINER = "header-container"
HEADER_TITLE = "header-title"
SCENE_CONTAINER = "scene-container"
STATUS_BAR = "status-bar"

# Overview IDs
OVERVIEW_VIEW = "overview-view"
OVERVIEW_HEADER = "overview-header"
NEW_DIR_BTN = "new-dir-btn"
DIRECTORY_LIST = "directory-list"
EMPTY_HINT = "empty-hint"

# Editor IDs
EDITOR_VIEW = "editor-view"
EDITOR_TITLE = "editor-title"
NAME_ROW = "name-row"
NAME_INPUT = "name-input"
NEW_SOURCE_BTN = "new-source-btn"
SOURCES_LIST = "sources-list"
NEW_EXCLUDE_BTN = "new-exclude-btn"
EXCLUDES_LIST = "excludes-list"
EDITOR_ERROR = "editor-error"
EDITOR_BUTTONS = "editor-buttons"
SAVE_BTN = "save-btn"
CANCEL_BTN = "cancel-btn"

# Folder picker modal IDs
FOLDER_PICKER_MODAL = "folder-picker-modal"
FOLDER_TREE = "folder-tree"
FOLDER_SELECTED = "folder-selected"
FOLDER_PARENT_BTN = "folder-parent-btn"
FOLDER_CHOOSE_BTN = "folder-choose-btn"
FOLDER_CANCEL_BTN = "folder-cancel-btn"
