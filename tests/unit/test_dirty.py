"""Tests for the dirty-tracking commit policy."""

from formstate.dirty import CommitMode, is_dirty, next_dirty, should_commit
from formstate.models import FieldState


def _state(dirty: bool) -> dict[str, FieldState]:
    return {"name": FieldState(dirty=dirty, is_valid=True, errors=[])}


class TestIsDirty:
    """Test reading the stored dirty flag."""

    def test_reads_flag(self):
        assert is_dirty(_state(True), "name") is True
        assert is_dirty(_state(False), "name") is False

    def test_unknown_field_is_clean(self):
        assert is_dirty(_state(True), "age") is False


class TestShouldCommit:
    """Test commit decisions per mode."""

    def test_always_commits(self):
        assert should_commit(CommitMode.ALWAYS, _state(False), "name") is True
        assert should_commit(CommitMode.ALWAYS, _state(True), "name") is True

    def test_if_dirty_commits_only_dirty_fields(self):
        assert should_commit(CommitMode.IF_DIRTY, _state(False), "name") is False
        assert should_commit(CommitMode.IF_DIRTY, _state(True), "name") is True

    def test_if_dirty_never_commits_unknown_fields(self):
        assert should_commit(CommitMode.IF_DIRTY, {}, "name") is False


class TestNextDirty:
    """Test the dirty flag carried by computed results."""

    def test_always_marks_dirty(self):
        assert next_dirty(CommitMode.ALWAYS, _state(False), "name") is True
        assert next_dirty(CommitMode.ALWAYS, _state(True), "name") is True
        assert next_dirty(CommitMode.ALWAYS, {}, "name") is True

    def test_if_dirty_keeps_stored_flag(self):
        assert next_dirty(CommitMode.IF_DIRTY, _state(False), "name") is False
        assert next_dirty(CommitMode.IF_DIRTY, _state(True), "name") is True

    def test_if_dirty_unknown_field_stays_clean(self):
        assert next_dirty(CommitMode.IF_DIRTY, {}, "name") is False

    def test_dirty_flag_matches_commit_decision(self):
        for mode in CommitMode:
            for dirty in (False, True):
                state = _state(dirty)
                assert next_dirty(mode, state, "name") == should_commit(mode, state, "name")
