"""Scene views: one widget per router scene."""

from ui.views.editor import EditorView
from ui.views.overview import OverviewView

__all__ = [
    "EditorView",
    "OverviewView",
]
