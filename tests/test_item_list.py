"""Tests for ItemList: values and per-row state stay aligned."""

import random
from dataclasses import dataclass, field

import pytest

from model import ExcludeRowState, IndexOutOfRange, ItemList, SourceRowState


@dataclass
class Tag:
    """Row state that remembers which value it was created for."""

    label: str = ""
    history: list[str] = field(default_factory=list)


def tagged_list(values):
    """ItemList whose states are tagged with their value at creation."""
    items = ItemList([], Tag)
    for value in values:
        index = items.append(value)
        items[index].state.label = value
    return items


class TestItemListBasics:
    """Test construction and read access."""

    def test_initial_rows_get_fresh_state(self):
        """One state per initial value, none shared."""
        items = ItemList(["a", "b"], SourceRowState)
        assert len(items) == 2
        assert items.values() == ["a", "b"]
        states = items.states()
        assert states[0] is not states[1]
        assert states[0].picker is not states[1].picker

    def test_values_returns_copy(self):
        """Mutating values() does not touch the list."""
        items = ItemList(["a"], ExcludeRowState)
        values = items.values()
        values.append("b")
        assert items.values() == ["a"]

    def test_iter_yields_rows(self):
        items = ItemList(["a", "b"], ExcludeRowState)
        assert [row.value for row in items] == ["a", "b"]

    def test_find(self):
        items = ItemList(["a", "b", "c"], ExcludeRowState)
        assert items.find(lambda row: row.value == "b") == 1
        assert items.find(lambda row: row.value == "z") is None


class TestAppend:
    """Test append()."""

    def test_returns_new_index(self):
        """append returns the old length."""
        items = ItemList(["a"], ExcludeRowState)
        assert items.append("b") == 1
        assert items.append("c") == 2

    def test_new_row_has_default_state(self):
        items = ItemList([], ExcludeRowState)
        items.append("x")
        assert items[0].state == ExcludeRowState()


class TestRemoveAt:
    """Test remove_at()."""

    def test_removes_value_and_state_together(self):
        items = tagged_list(["a", "b", "c"])
        removed = items.remove_at(1)
        assert removed.value == "b"
        assert removed.state.label == "b"
        assert items.values() == ["a", "c"]
        assert [s.label for s in items.states()] == ["a", "c"]

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_out_of_range_raises(self, index):
        """Invalid indices raise IndexOutOfRange and change nothing."""
        items = ItemList(["a", "b", "c"], ExcludeRowState)
        with pytest.raises(IndexOutOfRange):
            items.remove_at(index)
        assert items.values() == ["a", "b", "c"]

    def test_empty_list_raises(self):
        items = ItemList([], ExcludeRowState)
        with pytest.raises(IndexOutOfRange):
            items.remove_at(0)

    def test_index_out_of_range_is_index_error(self):
        """Callers catching IndexError also catch it."""
        assert issubclass(IndexOutOfRange, IndexError)


class TestUpdateAt:
    """Test update_at()."""

    def test_replaces_value_keeps_state(self):
        items = tagged_list(["a", "b"])
        state = items[1].state
        items.update_at(1, "B")
        assert items.values() == ["a", "B"]
        assert items[1].state is state

    def test_out_of_range_raises(self):
        items = ItemList(["a"], ExcludeRowState)
        with pytest.raises(IndexOutOfRange):
            items.update_at(1, "x")


class TestAlignment:
    """State i always belongs to value i, whatever the operation order."""

    @pytest.mark.parametrize("seed", range(20))
    def test_random_append_remove_sequences(self, seed):
        rng = random.Random(seed)
        items = tagged_list([])
        expected = []
        counter = 0
        for _ in range(200):
            if expected and rng.random() < 0.45:
                index = rng.randrange(len(expected))
                items.remove_at(index)
                expected.pop(index)
            else:
                value = f"v{counter}"
                counter += 1
                index = items.append(value)
                items[index].state.label = value
                expected.append(value)
            assert len(items.states()) == len(items)
            assert items.values() == expected
            assert [s.label for s in items.states()] == expected
