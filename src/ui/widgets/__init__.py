"""Custom Textual widgets for bup.

This package contains all custom widgets organized by domain.
"""

from ui.widgets.directory import (
    DirectoryListItem,
    FilteredDirectoryTree,
    describe,
    details,
)
from ui.widgets.rows import (
    ExcludeList,
    ExcludeRowItem,
    RowItem,
    RowList,
    SourceList,
    SourceRowItem,
)

__all__ = [
    # Directory widgets
    "DirectoryListItem",
    "FilteredDirectoryTree",
    "describe",
    "details",
    # Row widgets
    "ExcludeList",
    "ExcludeRowItem",
    "RowItem",
    "RowList",
    "SourceList",
    "SourceRowItem",
]
