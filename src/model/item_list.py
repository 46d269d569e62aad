"""ItemList: a repeated field stored as rows of (value, per-item UI state).

Each row keeps the domain value and its interaction state together, so
adding or removing an item can never leave a state entry behind or
shift it onto the wrong value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")
S = TypeVar("S")


class IndexOutOfRange(IndexError):
    """Raised for an index outside 0 <= i < len. Always a programming error."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index {index} out of range for {length} items")
        self.index = index
        self.length = length


@dataclass(eq=False)
class Row(Generic[T, S]):
    """One item: its domain value and its UI state."""

    value: T
    state: S


class ItemList(Generic[T, S]):
    """Ordered rows with append/remove/update as the only mutations."""

    def __init__(self, values: Iterable[T], state_factory: Callable[[], S]) -> None:
        self._state_factory = state_factory
        self._rows: list[Row[T, S]] = [Row(value, state_factory()) for value in values]

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row[T, S]]:
        return iter(self._rows)

    def __getitem__(self, index: int) -> Row[T, S]:
        self._check_index(index)
        return self._rows[index]

    def __repr__(self) -> str:
        return f"ItemList({self.values()!r})"

    def _check_index(self, index: int) -> None:
        # Negative indices are rejected, not wrapped
        if not 0 <= index < len(self._rows):
            raise IndexOutOfRange(index, len(self._rows))

    def values(self) -> list[T]:
        """Domain values in order (a new list)."""
        return [row.value for row in self._rows]

    def states(self) -> list[S]:
        """UI states in order (a new list)."""
        return [row.state for row in self._rows]

    def append(self, value: T) -> int:
        """Append a value with fresh state. Returns the new index."""
        self._rows.append(Row(value, self._state_factory()))
        return len(self._rows) - 1

    def remove_at(self, index: int) -> Row[T, S]:
        """Remove and return the row at index."""
        self._check_index(index)
        return self._rows.pop(index)

    def update_at(self, index: int, value: T) -> None:
        """Replace the value at index. The row's state is kept."""
        self._check_index(index)
        self._rows[index].value = value

    def find(self, predicate: Callable[[Row[T, S]], bool]) -> int | None:
        """Index of the first row matching predicate, or None."""
        for index, row in enumerate(self._rows):
            if predicate(row):
                return index
        return None
