"""Directory-related widgets: FilteredDirectoryTree, DirectoryListItem."""

from pathlib import Path

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, DirectoryTree, Label, Static

from controller.messages import DeleteRequested, EditRequested, ExpandRequested
from model import Directory
from ui.events import ActionRequested


class FilteredDirectoryTree(DirectoryTree):
    """A directory tree that only shows directories."""

    def filter_paths(self, paths: list[Path]) -> list[Path]:
        return [p for p in paths if p.is_dir()]


def describe(directory: Directory) -> str:
    """Short summary of sources/excludes for the overview."""
    sources = len(directory.sources)
    excludes = len(directory.excludes)
    parts = [f"{sources} source" + ("" if sources == 1 else "s")]
    if excludes:
        parts.append(f"{excludes} exclude" + ("" if excludes == 1 else "s"))
    return ", ".join(parts)


def details(directory: Directory) -> str:
    """One line per source (+) and exclude (-), as `bup --list` prints them."""
    lines = [f"+ {source or '(no folder selected)'}" for source in directory.sources]
    lines.extend(f"- {pattern}" for pattern in directory.excludes)
    return "\n".join(lines) or "Nothing to back up yet."


class DirectoryListItem(Vertical):
    """A row in the overview: click the name to expand, Edit to edit, x to delete."""

    def __init__(self, index: int, directory: Directory, expanded: bool = False) -> None:
        super().__init__(classes="directory-item")
        self.index = index
        self.directory = directory
        self.show_details = expanded

    def compose(self) -> ComposeResult:
        marker = "v" if self.show_details else ">"
        with Horizontal(classes="directory-header"):
            yield Button(f"{marker} {self.directory.name or '(unnamed)'}", classes="expand-btn")
            yield Label(describe(self.directory), classes="directory-summary")
            yield Button("Edit", classes="edit-btn")
            yield Button("x", classes="remove-btn", variant="error")
        if self.show_details:
            yield Static(details(self.directory), classes="directory-details")

    @on(Button.Pressed, ".expand-btn")
    def on_expand_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(ActionRequested(ExpandRequested(self.index, target=self.directory)))

    @on(Button.Pressed, ".edit-btn")
    def on_edit_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(ActionRequested(EditRequested(self.index, target=self.directory)))

    @on(Button.Pressed, ".remove-btn")
    def on_remove_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(ActionRequested(DeleteRequested(self.index, target=self.directory)))
