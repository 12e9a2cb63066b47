"""Tests for editor commands and the undo history."""

import pytest

from src.behavioral.command import (
    Application,
    CommandHistory,
    CopyCommand,
    CutCommand,
    Editor,
    run_demo,
)


class TestEditor:
    """Test the command receiver."""

    def test_select_and_get_selection(self):
        editor = Editor("hello world")
        editor.select(6, 11)
        assert editor.get_selection() == "world"

    def test_invalid_selection_rejected(self):
        editor = Editor("abc")
        with pytest.raises(ValueError):
            editor.select(2, 10)
        with pytest.raises(ValueError):
            editor.select(2, 1)

    def test_replace_selection(self):
        editor = Editor("hello world")
        editor.select(0, 5)
        editor.replace_selection("howdy")
        assert editor.text == "howdy world"
        assert editor.get_selection() == "howdy"


class TestApplication:
    """Test command execution and undo."""

    def setup_method(self):
        """Set up test fixtures."""
        self.app = Application(Editor("one two three"))
        self.editor = self.app.active_editor

    def test_copy_does_not_enter_history(self):
        """Commands that leave the editor unchanged are not undoable."""
        self.editor.select(0, 3)
        self.app.copy()
        assert self.app.clipboard == "one"
        assert len(self.app.history) == 0

    def test_cut_and_undo(self):
        self.editor.select(3, 7)
        self.app.cut()
        assert self.editor.text == "one three"
        assert self.app.clipboard == " two"
        assert len(self.app.history) == 1

        assert self.app.undo() is True
        assert self.editor.text == "one two three"
        assert len(self.app.history) == 0

    def test_paste_replaces_selection(self):
        self.app.clipboard = "ONE"
        self.editor.select(0, 3)
        self.app.paste()
        assert self.editor.text == "ONE two three"

    def test_undo_order_is_last_in_first_out(self):
        self.editor.select(0, 4)
        self.app.cut()
        self.editor.select(0, 0)
        self.app.paste()
        assert self.editor.text == "one two three"

        self.app.undo_last()
        assert self.editor.text == "two three"
        self.app.undo_last()
        assert self.editor.text == "one two three"

    def test_undo_with_empty_history(self):
        assert self.app.undo() is False

    def test_execute_return_values(self):
        """Copy reports no change, cut reports a change."""
        self.editor.select(0, 3)
        assert CopyCommand(self.app, self.editor).execute() is False
        assert CutCommand(self.app, self.editor).execute() is True


class TestCommandHistory:
    def test_pop_empty_returns_none(self):
        assert CommandHistory().pop() is None


def test_demo_output():
    """The demo walks through copy, cut, paste and two undos."""
    lines = []
    run_demo(lines.append)
    assert lines == [
        "Copied: 'Hello'",
        "After cut: 'Hello,  pattern!'",
        "After paste: 'Hello,  patterncommand'",
        "After undo: 'Hello,  pattern!'",
        "After second undo: 'Hello, command pattern!'",
        "History size: 0",
    ]
