"""Tests for the FolderPicker state machine."""

from model import FolderPicker, PickerStatus


class TestRequest:
    """Test starting a pick."""

    def test_starts_idle(self):
        picker = FolderPicker()
        assert picker.status is PickerStatus.IDLE
        assert not picker.pending

    def test_request_awaits_selection(self):
        picker = FolderPicker()
        token = picker.request()
        assert token is not None
        assert picker.status is PickerStatus.AWAITING_SELECTION
        assert picker.token == token

    def test_second_request_is_ignored(self):
        """A browse while one is pending is a no-op, not queued."""
        picker = FolderPicker()
        token = picker.request()
        assert picker.request() is None
        assert picker.token == token
        assert picker.pending

    def test_tokens_are_unique_across_pickers(self):
        a = FolderPicker()
        b = FolderPicker()
        assert a.request() != b.request()


class TestComplete:
    """Test applying a dialog reply."""

    def test_resolved(self):
        picker = FolderPicker()
        token = picker.request()
        assert picker.complete(token, "/data") is PickerStatus.RESOLVED
        assert picker.status is PickerStatus.IDLE
        assert picker.last_outcome is PickerStatus.RESOLVED
        assert picker.last_path == "/data"
        assert picker.token is None

    def test_cancelled(self):
        picker = FolderPicker()
        token = picker.request()
        assert picker.complete(token, None) is PickerStatus.CANCELLED
        assert picker.status is PickerStatus.IDLE
        assert picker.last_outcome is PickerStatus.CANCELLED
        assert picker.last_path is None

    def test_stale_token_ignored(self):
        picker = FolderPicker()
        token = picker.request()
        assert picker.complete(token + 1000, "/x") is None
        assert picker.pending
        assert picker.token == token

    def test_reply_when_idle_ignored(self):
        picker = FolderPicker()
        token = picker.request()
        picker.complete(token, "/x")
        assert picker.complete(token, "/y") is None
        assert picker.last_path == "/x"

    def test_can_request_again_after_reply(self):
        picker = FolderPicker()
        picker.complete(picker.request(), None)
        assert picker.request() is not None
