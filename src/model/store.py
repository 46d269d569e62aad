"""DirectoryStore: the canonical ordered list of Directory records."""

from __future__ import annotations

from typing import Iterable, Iterator

from model.directory import Directory
from model.item_list import IndexOutOfRange


class DirectoryStore:
    """Ordered Directory records.

    Indices are only meaningful until the next append/delete. Editors must
    work on a clone, never on an entry returned from here.
    """

    def __init__(self, directories: Iterable[Directory] = ()) -> None:
        self._directories: list[Directory] = list(directories)

    def __len__(self) -> int:
        return len(self._directories)

    def __iter__(self) -> Iterator[Directory]:
        return iter(list(self._directories))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._directories):
            raise IndexOutOfRange(index, len(self._directories))

    def list(self) -> list[Directory]:
        """All directories in order (a new list)."""
        return list(self._directories)

    def get(self, index: int) -> Directory:
        self._check_index(index)
        return self._directories[index]

    def replace(self, index: int, directory: Directory) -> None:
        self._check_index(index)
        self._directories[index] = directory

    def append(self, directory: Directory) -> int:
        """Append a directory. Returns its index."""
        self._directories.append(directory)
        return len(self._directories) - 1

    def delete(self, index: int) -> Directory:
        """Remove and return the directory at index."""
        self._check_index(index)
        return self._directories.pop(index)

    def index_of(self, directory: Directory) -> int | None:
        """Index of this exact object (identity, not equality), or None."""
        for index, entry in enumerate(self._directories):
            if entry is directory:
                return index
        return None
