"""Command - turn a request into a standalone object.

Problem:
    A text editor triggers the same operations (copy, cut, paste, undo) from
    toolbar buttons, menus and shortcuts. Putting the logic in every trigger
    duplicates it, and nothing records what happened so it can be undone.

Solution:
    Wrap each operation in a command object holding the receiver and any
    state needed to reverse it. Triggers only call ``execute``. Commands that
    change state are pushed onto a history so the application can undo them.

Structure:
    - ``Command`` declares ``execute`` and keeps a backup for ``undo``.
    - ``CopyCommand``, ``CutCommand``, ``PasteCommand`` and ``UndoCommand``
      are concrete commands.
    - ``Editor`` is the receiver doing the real work.
    - ``CommandHistory`` is a stack of executed commands.
    - ``Application`` is the invoker that runs commands and records them.

Usage:
    - Objects must be parameterized with operations.
    - Operations must be queued, scheduled or executed remotely.
    - Reversible operations are needed.

Advantages:
    - Invokers are decoupled from the receivers (single responsibility).
    - New commands are added without breaking client code (open/closed).
    - Undo/redo and deferred execution come naturally.

Disadvantages:
    - Adds a layer between senders and receivers.
"""
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Editor:
    """Receiver: a text buffer with a selection."""

    def __init__(self, text: str = ""):
        self.text = text
        self.selection_start = 0
        self.selection_end = len(text)

    def select(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(f"Invalid selection {start}:{end} for text of length {len(self.text)}")
        self.selection_start = start
        self.selection_end = end

    def get_selection(self) -> str:
        return self.text[self.selection_start:self.selection_end]

    def delete_selection(self) -> None:
        self.replace_selection("")

    def replace_selection(self, text: str) -> None:
        self.text = self.text[:self.selection_start] + text + self.text[self.selection_end:]
        self.selection_end = self.selection_start + len(text)


class Command(ABC):
    def __init__(self, app: "Application", editor: Editor):
        self.app = app
        self.editor = editor
        self.backup: Optional[str] = None

    def save_backup(self) -> None:
        self.backup = self.editor.text

    def undo(self) -> None:
        if self.backup is not None:
            self.editor.text = self.backup
            self.editor.selection_start = 0
            self.editor.selection_end = len(self.backup)

    @abstractmethod
    def execute(self) -> bool:
        """Run the command. Return True when it changed the editor and belongs in history."""


class CopyCommand(Command):
    def execute(self) -> bool:
        self.app.clipboard = self.editor.get_selection()
        return False


class CutCommand(Command):
    def execute(self) -> bool:
        self.save_backup()
        self.app.clipboard = self.editor.get_selection()
        self.editor.delete_selection()
        return True


class PasteCommand(Command):
    def execute(self) -> bool:
        self.save_backup()
        self.editor.replace_selection(self.app.clipboard)
        return True


class UndoCommand(Command):
    def execute(self) -> bool:
        self.app.undo()
        return False


class CommandHistory:
    def __init__(self):
        self._history: List[Command] = []

    def push(self, command: Command) -> None:
        self._history.append(command)

    def pop(self) -> Optional[Command]:
        if not self._history:
            return None
        return self._history.pop()

    def __len__(self) -> int:
        return len(self._history)


class Application:
    """Invoker: executes commands and keeps the undo history."""

    def __init__(self, editor: Optional[Editor] = None):
        self.clipboard = ""
        self.active_editor = editor if editor is not None else Editor()
        self.history = CommandHistory()

    def execute_command(self, command: Command) -> None:
        if command.execute():
            self.history.push(command)
        logger.debug("Executed command", command=type(command).__name__, history=len(self.history))

    def undo(self) -> bool:
        """Revert the most recent state-changing command. False when there is nothing to undo."""
        command = self.history.pop()
        if command is None:
            return False
        command.undo()
        return True

    def copy(self) -> None:
        self.execute_command(CopyCommand(self, self.active_editor))

    def cut(self) -> None:
        self.execute_command(CutCommand(self, self.active_editor))

    def paste(self) -> None:
        self.execute_command(PasteCommand(self, self.active_editor))

    def undo_last(self) -> None:
        self.execute_command(UndoCommand(self, self.active_editor))


def run_demo(output: Callable[[str], None] = print) -> None:
    app = Application(Editor("Hello, command pattern!"))
    editor = app.active_editor

    editor.select(0, 5)
    app.copy()
    output(f"Copied: {app.clipboard!r}")

    editor.select(7, 14)
    app.cut()
    output(f"After cut: {editor.text!r}")

    editor.select(len(editor.text) - 1, len(editor.text))
    app.paste()
    output(f"After paste: {editor.text!r}")

    app.undo_last()
    output(f"After undo: {editor.text!r}")
    app.undo_last()
    output(f"After second undo: {editor.text!r}")
    output(f"History size: {len(app.history)}")
