"""Model classes for bup."""

from model.directory import Directory
from model.folder_picker import FolderPicker, PickerStatus
from model.item_list import IndexOutOfRange, ItemList, Row
from model.row_state import ExcludeRowState, InputState, SourceRowState
from model.store import DirectoryStore

__all__ = [
    "Directory",
    "DirectoryStore",
    "ExcludeRowState",
    "FolderPicker",
    "IndexOutOfRange",
    "InputState",
    "ItemList",
    "PickerStatus",
    "Row",
    "SourceRowState",
]
