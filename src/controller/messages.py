"""Messages exchanged between the UI, the editor and the scene router.

Overview and editor messages come from the UI. CommitRequested and
CancelRequested are produced by the editor for the router. BrowseFolder is a
command the router hands back to the UI to run.

Messages that address one entry carry its index. Widgets also attach the
entry itself (target/row): the receiver then looks the entry up when the
message is handled, and drops the message if the entry is gone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from model import Directory


# Overview
@dataclass(frozen=True)
class EditRequested:
    index: int
    target: Directory | None = field(default=None, compare=False)


@dataclass(frozen=True)
class NewRequested:
    pass


@dataclass(frozen=True)
class DeleteRequested:
    index: int
    target: Directory | None = field(default=None, compare=False)


@dataclass(frozen=True)
class ExpandRequested:
    """Show or hide the sources/excludes of one overview entry."""

    index: int
    target: Directory | None = field(default=None, compare=False)


# Editor
@dataclass(frozen=True)
class SetName:
    name: str


@dataclass(frozen=True)
class NewSource:
    pass


@dataclass(frozen=True)
class SetSource:
    index: int
    path: str
    row: Any = field(default=None, compare=False)


@dataclass(frozen=True)
class DelSource:
    index: int
    row: Any = field(default=None, compare=False)


@dataclass(frozen=True)
class BrowseSource:
    index: int
    row: Any = field(default=None, compare=False)


@dataclass(frozen=True)
class SourcePicked:
    """Reply from the folder dialog. path is None when the user cancelled."""

    token: int
    path: str | None


@dataclass(frozen=True)
class NewExclude:
    pass


@dataclass(frozen=True)
class SetExclude:
    index: int
    pattern: str
    row: Any = field(default=None, compare=False)


@dataclass(frozen=True)
class DelExclude:
    index: int
    row: Any = field(default=None, compare=False)


@dataclass(frozen=True)
class Save:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


# Editor -> router
@dataclass(frozen=True)
class CommitRequested:
    draft: Directory
    warnings: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CancelRequested:
    pass


# Router -> UI
@dataclass(frozen=True)
class BrowseFolder:
    token: int


OVERVIEW_MESSAGES = (EditRequested, NewRequested, DeleteRequested, ExpandRequested)
EDITOR_MESSAGES = (
    SetName,
    NewSource,
    SetSource,
    DelSource,
    BrowseSource,
    SourcePicked,
    NewExclude,
    SetExclude,
    DelExclude,
    Save,
    Cancel,
)
