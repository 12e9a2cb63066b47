"""Factory Method - let subclasses decide which product class to create.

Problem:
    A dialog renders an OK button, but the button differs between a desktop
    window and a web page. Hard-coding ``WindowsButton()`` in the dialog ties
    every dialog to one platform.

Solution:
    The dialog calls a factory method instead of a constructor. Each creator
    subclass overrides that method to return its own button; the rest of the
    dialog logic only relies on the common button interface.

Structure:
    - ``Button`` is the product interface; ``WindowsButton`` and ``HTMLButton``
      are concrete products.
    - ``Dialog`` is the creator with the ``create_button`` factory method and
      business logic in ``render``.
    - ``WindowsDialog`` and ``WebDialog`` are concrete creators.

Usage:
    - The exact types of objects the code works with are not known beforehand.
    - Library users should be able to extend its internal components.
    - Existing objects should be reused instead of rebuilt each time.

Advantages:
    - Creators are decoupled from concrete products.
    - Product creation lives in one place (single responsibility).
    - New product types need no changes to client code (open/closed).

Disadvantages:
    - A subclass per product type can make the hierarchy large.
"""
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Type

from src.domain.core.exceptions import ConfigurationError


class Button(ABC):
    @abstractmethod
    def render(self) -> str:
        pass

    @abstractmethod
    def on_click(self, action: str) -> str:
        pass


class WindowsButton(Button):
    def render(self) -> str:
        return "Render a button in Windows style"

    def on_click(self, action: str) -> str:
        return f"Bind a native OS click event: {action}"


class HTMLButton(Button):
    def render(self) -> str:
        return "<button>OK</button>"

    def on_click(self, action: str) -> str:
        return f"Bind a web browser click event: {action}"


class Dialog(ABC):
    @abstractmethod
    def create_button(self) -> Button:
        """Factory method."""

    def render(self) -> List[str]:
        ok_button = self.create_button()
        return [ok_button.on_click("close dialog"), ok_button.render()]


class WindowsDialog(Dialog):
    def create_button(self) -> Button:
        return WindowsButton()


class WebDialog(Dialog):
    def create_button(self) -> Button:
        return HTMLButton()


DIALOGS: Dict[str, Type[Dialog]] = {
    "windows": WindowsDialog,
    "web": WebDialog,
}


def dialog_for(platform: str) -> Dialog:
    dialog_class = DIALOGS.get(platform.lower())
    if dialog_class is None:
        raise ConfigurationError(
            f"Unknown platform '{platform}'. Must be one of: {sorted(DIALOGS)}"
        )
    return dialog_class()


def run_demo(output: Callable[[str], None] = print) -> None:
    for platform in ("windows", "web"):
        output(f"{platform}:")
        for line in dialog_for(platform).render():
            output(f"  {line}")
