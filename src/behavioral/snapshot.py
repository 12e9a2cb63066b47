"""Snapshot (Memento) - save and restore an object's state without exposing it.

Problem:
    An editor needs undo. Copying its fields from the outside either breaks
    encapsulation or fails as soon as the editor gains private state.

Solution:
    Let the editor produce snapshots of itself. A snapshot is immutable and
    only its originator can apply it back; a caretaker keeps snapshots in a
    stack without looking inside.

Structure:
    - ``Editor`` is the originator: it creates snapshots and is restored from them.
    - ``Snapshot`` is the memento holding a copy of the editor's state.
    - ``EditorHistory`` is the caretaker keeping the snapshot stack.

Usage:
    - Snapshots of an object's state are needed to restore a previous state.
    - Direct access to the object's fields would break its encapsulation.

Advantages:
    - State is captured without violating encapsulation.
    - The originator stays simple; the caretaker owns the history.

Disadvantages:
    - Frequent snapshots consume memory.
    - Caretakers must track the originator's lifecycle to discard stale snapshots.
"""
from typing import Callable, List

from pydantic import BaseModel, ConfigDict


class Snapshot(BaseModel):
    """Immutable copy of an editor's state, bound to the editor that made it."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    editor: "Editor"
    text: str
    cursor_x: int
    cursor_y: int
    selection_width: int

    def restore(self) -> None:
        self.editor.set_text(self.text)
        self.editor.set_cursor(self.cursor_x, self.cursor_y)
        self.editor.set_selection_width(self.selection_width)


class Editor:
    def __init__(self):
        self.text = ""
        self.cursor_x = 0
        self.cursor_y = 0
        self.selection_width = 0

    def set_text(self, text: str) -> None:
        self.text = text

    def set_cursor(self, x: int, y: int) -> None:
        self.cursor_x = x
        self.cursor_y = y

    def set_selection_width(self, width: int) -> None:
        self.selection_width = width

    def create_snapshot(self) -> Snapshot:
        return Snapshot(
            editor=self,
            text=self.text,
            cursor_x=self.cursor_x,
            cursor_y=self.cursor_y,
            selection_width=self.selection_width,
        )

    def describe(self) -> str:
        return (
            f"text={self.text!r} cursor=({self.cursor_x}, {self.cursor_y}) "
            f"selection={self.selection_width}"
        )


Snapshot.model_rebuild()


class EditorHistory:
    """Caretaker: stack of snapshots for one editor."""

    def __init__(self, editor: Editor):
        self.editor = editor
        self._history: List[Snapshot] = []

    def save_change(self) -> None:
        self._history.append(self.editor.create_snapshot())

    def revert_last_change(self) -> bool:
        if not self._history:
            return False
        self._history.pop().restore()
        return True

    def __len__(self) -> int:
        return len(self._history)


def run_demo(output: Callable[[str], None] = print) -> None:
    editor = Editor()
    history = EditorHistory(editor)

    history.save_change()
    editor.set_text("Hello")
    editor.set_cursor(5, 0)
    output(f"Typed: {editor.describe()}")

    history.save_change()
    editor.set_text("Hello, world")
    editor.set_cursor(12, 0)
    editor.set_selection_width(5)
    output(f"Typed more: {editor.describe()}")

    history.revert_last_change()
    output(f"Reverted: {editor.describe()}")
    history.revert_last_change()
    output(f"Reverted again: {editor.describe()}")
    output(f"Nothing left to revert: {not history.revert_last_change()}")
