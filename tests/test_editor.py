"""Tests for the Editor state machine."""

import pytest

from controller.editor import Editor, EditorMode
from controller.messages import (
    BrowseFolder,
    BrowseSource,
    Cancel,
    CancelRequested,
    CommitRequested,
    DelExclude,
    DelSource,
    NewExclude,
    NewSource,
    Save,
    SetExclude,
    SetName,
    SetSource,
    SourcePicked,
)
from model import Directory, IndexOutOfRange, PickerStatus


@pytest.fixture
def editor(photos):
    return Editor(photos.clone())


class TestEditorInit:
    """Test editor construction."""

    def test_rows_match_directory(self):
        editor = Editor(Directory("Code", ["/src", "/notes"], ["*.pyc"]))
        assert editor.name == "Code"
        assert editor.sources.values() == ["/src", "/notes"]
        assert editor.excludes.values() == ["*.pyc"]
        assert len(editor.sources.states()) == 2
        assert len(editor.excludes.states()) == 1

    def test_starts_editing(self, editor):
        assert editor.mode is EditorMode.EDITING
        assert editor.error is None

    def test_draft_is_fresh_copy(self, editor):
        """draft() never hands out the editor's own lists."""
        draft = editor.draft()
        draft.sources.append("/zzz")
        assert editor.sources.values() == ["/a"]


class TestEditorEdits:
    """Test field edits and add/remove."""

    def test_set_name(self, editor):
        assert editor.update(SetName("Pictures")) is None
        assert editor.draft().name == "Pictures"

    def test_add_and_remove_sources(self, editor):
        editor.update(NewSource())
        editor.update(SetSource(1, "/b"))
        assert editor.draft().sources == ["/a", "/b"]
        assert len(editor.sources.states()) == 2
        editor.update(DelSource(0))
        assert editor.draft().sources == ["/b"]
        assert len(editor.sources.states()) == 1

    def test_add_set_remove_excludes(self, editor):
        editor.update(NewExclude())
        editor.update(NewExclude())
        editor.update(SetExclude(0, "*.tmp"))
        editor.update(SetExclude(1, "cache"))
        editor.update(DelExclude(0))
        assert editor.draft().excludes == ["cache"]
        assert len(editor.excludes.states()) == 1

    def test_remove_invalid_index_raises(self, editor):
        """Out-of-range indices are programming errors."""
        with pytest.raises(IndexOutOfRange):
            editor.update(DelSource(5))
        with pytest.raises(IndexOutOfRange):
            editor.update(SetExclude(0, "x"))

    def test_edit_clears_error(self, editor):
        editor.update(SetName(""))
        editor.update(Save())
        assert editor.mode is EditorMode.EDITING_WITH_ERROR
        editor.update(NewExclude())
        assert editor.mode is EditorMode.EDITING
        assert editor.error is None

    def test_unknown_message_ignored(self, editor):
        assert editor.update("nonsense") is None
        assert editor.draft() == Directory("Photos", ["/a"], [])


class TestEditorSave:
    """Test Save and Cancel."""

    def test_save_valid_requests_commit(self, editor):
        result = editor.update(Save())
        assert isinstance(result, CommitRequested)
        assert result.draft == Directory("Photos", ["/a"], [])
        assert result.warnings == ()
        assert editor.error is None

    def test_save_empty_name_shows_error(self, editor):
        editor.update(SetName("  "))
        assert editor.update(Save()) is None
        assert editor.mode is EditorMode.EDITING_WITH_ERROR
        assert editor.error == "Name should not be empty"

    def test_save_shows_first_error_only(self, editor):
        editor.update(NewSource())
        editor.update(NewExclude())
        editor.update(Save())
        assert editor.error == "Source 2 should have a path"

    def test_save_carries_duplicate_warnings(self, editor):
        editor.update(NewSource())
        editor.update(SetSource(1, "/a"))
        result = editor.update(Save())
        assert isinstance(result, CommitRequested)
        assert result.warnings == ("Duplicate source: /a",)

    def test_cancel_always_requested(self, editor):
        editor.update(SetName(""))
        assert isinstance(editor.update(Cancel()), CancelRequested)


class TestEditorBrowse:
    """Test folder picking for source rows."""

    def test_browse_returns_command(self, editor):
        command = editor.update(BrowseSource(0))
        assert isinstance(command, BrowseFolder)
        picker = editor.sources[0].state.picker
        assert picker.status is PickerStatus.AWAITING_SELECTION
        assert picker.token == command.token

    def test_second_browse_same_slot_ignored(self, editor):
        editor.update(BrowseSource(0))
        assert editor.update(BrowseSource(0)) is None

    def test_browse_other_slots_independent(self, editor):
        editor.update(NewSource())
        first = editor.update(BrowseSource(0))
        second = editor.update(BrowseSource(1))
        assert first.token != second.token

    def test_picked_path_fills_slot(self, editor):
        command = editor.update(BrowseSource(0))
        editor.update(SourcePicked(command.token, "/picked"))
        assert editor.draft().sources == ["/picked"]
        assert editor.sources[0].state.picker.status is PickerStatus.IDLE

    def test_cancelled_pick_leaves_slot(self, editor):
        command = editor.update(BrowseSource(0))
        assert editor.sources[0].state.picker.status is PickerStatus.AWAITING_SELECTION
        editor.update(SourcePicked(command.token, None))
        assert editor.draft().sources == ["/a"]
        assert editor.sources[0].state.picker.status is PickerStatus.IDLE
        assert editor.sources[0].state.picker.last_outcome is PickerStatus.CANCELLED

    def test_pick_follows_row_after_earlier_row_removed(self, editor):
        """The reply lands on the row that asked, even after indices shift."""
        editor.update(NewSource())
        command = editor.update(BrowseSource(1))
        editor.update(DelSource(0))
        editor.update(SourcePicked(command.token, "/late"))
        assert editor.draft().sources == ["/late"]

    def test_pick_for_removed_row_discarded(self, editor):
        command = editor.update(BrowseSource(0))
        editor.update(DelSource(0))
        editor.update(NewSource())
        editor.update(SourcePicked(command.token, "/late"))
        assert editor.draft().sources == [""]

    def test_resolved_pick_clears_error(self, editor):
        editor.update(SetSource(0, ""))
        editor.update(Save())
        assert editor.error == "Source 1 should have a path"
        command = editor.update(BrowseSource(0))
        editor.update(SourcePicked(command.token, "/ok"))
        assert editor.error is None


class TestRowAddressedMessages:
    """Messages that carry their row follow it, whatever index they were sent with."""

    @pytest.fixture
    def two_sources(self):
        return Editor(Directory("Photos", ["/a", "/b"], ["*.tmp", "cache"]))

    def test_back_to_back_removes(self, two_sources):
        """Both removes posted from one render apply to the rows that were clicked."""
        first, second = list(two_sources.sources)
        two_sources.update(DelSource(0, row=first))
        two_sources.update(DelSource(1, row=second))
        assert two_sources.sources.values() == []

    def test_removed_row_is_ignored(self, two_sources):
        first = two_sources.sources[0]
        two_sources.update(DelSource(0, row=first))
        assert two_sources.update(DelSource(0, row=first)) is None
        assert two_sources.sources.values() == ["/b"]

    def test_set_follows_shifted_row(self, two_sources):
        second = two_sources.sources[1]
        two_sources.update(DelSource(0, row=two_sources.sources[0]))
        two_sources.update(SetSource(1, "/c", row=second))
        assert two_sources.sources.values() == ["/c"]

    def test_browse_removed_row_returns_nothing(self, two_sources):
        first = two_sources.sources[0]
        two_sources.update(DelSource(0, row=first))
        assert two_sources.update(BrowseSource(0, row=first)) is None
        assert not first.state.picker.pending

    def test_excludes_follow_their_rows(self, two_sources):
        first, second = list(two_sources.excludes)
        two_sources.update(DelExclude(0, row=first))
        two_sources.update(SetExclude(1, "*.log", row=second))
        two_sources.update(DelExclude(0, row=first))
        assert two_sources.excludes.values() == ["*.log"]

    def test_ignored_message_keeps_error(self, two_sources):
        first = two_sources.sources[0]
        two_sources.update(DelSource(0, row=first))
        two_sources.error = "Name should not be empty"
        two_sources.update(DelSource(0, row=first))
        assert two_sources.mode is EditorMode.EDITING_WITH_ERROR
