"""Per-row UI state kept next to each source/exclude value."""

from dataclasses import dataclass, field

from model.folder_picker import FolderPicker


@dataclass
class InputState:
    """Focus and cursor of a text input, restored after the row list re-renders."""

    focused: bool = False
    cursor_position: int = 0


@dataclass
class SourceRowState:
    """State for one source row: path input and folder picker."""

    input: InputState = field(default_factory=InputState)
    picker: FolderPicker = field(default_factory=FolderPicker)


@dataclass
class ExcludeRowState:
    """State for one exclude row."""

    input: InputState = field(default_factory=InputState)
