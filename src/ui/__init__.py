"""UI module containing widgets, views, modals and styles."""

from ui.widgets import (
    DirectoryListItem,
    ExcludeList,
    ExcludeRowItem,
    FilteredDirectoryTree,
    SourceList,
    SourceRowItem,
)
from ui.views import EditorView, OverviewView
from ui.events import ActionRequested, FolderChosen
from ui import ids

__all__ = [
    # Widgets
    "DirectoryListItem",
    "ExcludeList",
    "ExcludeRowItem",
    "FilteredDirectoryTree",
    "SourceList",
    "SourceRowItem",
    # Views
    "EditorView",
    "OverviewView",
    # Messages
    "ActionRequested",
    "FolderChosen",
]
