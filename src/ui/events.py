"""Textual messages that carry controller actions to the app."""

from __future__ import annotations

from typing import Any

from textual.message import Message


class ActionRequested(Message):
    """A widget asks the app to route an overview/editor message."""

    def __init__(self, action: Any) -> None:
        super().__init__()
        self.action = action


class FolderChosen(Message):
    """The folder dialog finished. path is None when it was cancelled."""

    def __init__(self, token: int, path: str | None) -> None:
        super().__init__()
        self.token = token
        self.path = path
