"""Tests for editor snapshots and the caretaker history."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.behavioral.snapshot import Editor, EditorHistory, run_demo


class TestSnapshot:
    """Test capturing and restoring editor state."""

    def setup_method(self):
        """Set up test fixtures."""
        self.editor = Editor()
        self.history = EditorHistory(self.editor)

    def test_restore_previous_state(self):
        self.editor.set_text("draft")
        self.editor.set_cursor(5, 1)
        self.history.save_change()

        self.editor.set_text("final")
        self.editor.set_cursor(0, 0)
        self.editor.set_selection_width(3)

        assert self.history.revert_last_change() is True
        assert self.editor.text == "draft"
        assert (self.editor.cursor_x, self.editor.cursor_y) == (5, 1)
        assert self.editor.selection_width == 0

    def test_revert_is_last_in_first_out(self):
        for text in ("a", "ab", "abc"):
            self.history.save_change()
            self.editor.set_text(text)

        self.history.revert_last_change()
        assert self.editor.text == "ab"
        self.history.revert_last_change()
        assert self.editor.text == "a"
        assert len(self.history) == 1

    def test_revert_with_empty_history(self):
        assert self.history.revert_last_change() is False

    def test_snapshot_is_immutable(self):
        snapshot = self.editor.create_snapshot()
        with pytest.raises(PydanticValidationError):
            snapshot.text = "changed"

    def test_snapshot_is_independent_of_later_edits(self):
        self.editor.set_text("before")
        snapshot = self.editor.create_snapshot()
        self.editor.set_text("after")
        assert snapshot.text == "before"


def test_demo_output():
    lines = []
    run_demo(lines.append)
    assert lines == [
        "Typed: text='Hello' cursor=(5, 0) selection=0",
        "Typed more: text='Hello, world' cursor=(12, 0) selection=5",
        "Reverted: text='Hello' cursor=(5, 0) selection=0",
        "Reverted again: text='' cursor=(0, 0) selection=0",
        "Nothing left to revert: True",
    ]
