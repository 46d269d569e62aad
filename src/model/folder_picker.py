"""Folder picker state machine for a single source slot."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum

# Tokens are unique for the whole process so a late reply can never match
# a picker that was created after the request was made.
_tokens = itertools.count(1)


class PickerStatus(Enum):
    """States of a folder pick interaction."""

    IDLE = "idle"
    AWAITING_SELECTION = "awaiting"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"


@dataclass
class FolderPicker:
    """Tracks at most one in-flight folder choice.

    RESOLVED and CANCELLED are recorded in last_outcome; the picker itself
    goes straight back to IDLE once a reply has been applied.
    """

    status: PickerStatus = PickerStatus.IDLE
    token: int | None = None
    last_outcome: PickerStatus | None = None
    last_path: str | None = None

    @property
    def pending(self) -> bool:
        return self.status is PickerStatus.AWAITING_SELECTION

    def request(self) -> int | None:
        """Start a pick. Returns the token, or None if one is already pending."""
        if self.pending:
            return None
        self.token = next(_tokens)
        self.status = PickerStatus.AWAITING_SELECTION
        return self.token

    def complete(self, token: int, path: str | None) -> PickerStatus | None:
        """Apply a dialog reply.

        Returns RESOLVED or CANCELLED, or None when the token does not belong
        to the pending request (nothing changes in that case).
        """
        if not self.pending or token != self.token:
            return None
        outcome = PickerStatus.RESOLVED if path else PickerStatus.CANCELLED
        self.last_outcome = outcome
        self.last_path = path if path else None
        self.status = PickerStatus.IDLE
        self.token = None
        return outcome
