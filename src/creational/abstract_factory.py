"""Abstract Factory - create families of related objects without naming their classes.

Problem:
    A cross-platform UI needs buttons and checkboxes that match the host
    operating system. Mixing a Windows button with a macOS checkbox must be
    impossible, and client code should not branch on the platform everywhere.

Solution:
    Declare one factory interface with a creation method per product. Each
    platform implements the whole interface, so a single factory always
    yields a consistent family. The application receives a factory once, at
    configuration time.

Structure:
    - ``Button`` and ``Checkbox`` are the abstract products.
    - ``WinButton``, ``MacButton``, ``WinCheckbox``, ``MacCheckbox`` are concrete products.
    - ``GUIFactory`` is the abstract factory; ``WinFactory`` and ``MacFactory`` implement it.
    - ``Application`` is the client; ``factory_for`` configures it from an OS name.

Usage:
    - Code must work with families of related products without depending on
      their concrete classes.
    - A class has many factory methods that blur its main responsibility.

Advantages:
    - Products from one factory are compatible with each other.
    - Client code is decoupled from concrete products.
    - Product creation is in one place (single responsibility); new variants
      need no client changes (open/closed).

Disadvantages:
    - Many new interfaces and classes come with the pattern.
"""
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Type

from src.domain.core.exceptions import ConfigurationError


class Button(ABC):
    @abstractmethod
    def paint(self) -> str:
        pass


class Checkbox(ABC):
    @abstractmethod
    def paint(self) -> str:
        pass


class WinButton(Button):
    def paint(self) -> str:
        return "Render a button in Windows style"


class MacButton(Button):
    def paint(self) -> str:
        return "Render a button in macOS style"


class WinCheckbox(Checkbox):
    def paint(self) -> str:
        return "Render a checkbox in Windows style"


class MacCheckbox(Checkbox):
    def paint(self) -> str:
        return "Render a checkbox in macOS style"


class GUIFactory(ABC):
    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        pass


class WinFactory(GUIFactory):
    def create_button(self) -> Button:
        return WinButton()

    def create_checkbox(self) -> Checkbox:
        return WinCheckbox()


class MacFactory(GUIFactory):
    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()


FACTORIES: Dict[str, Type[GUIFactory]] = {
    "windows": WinFactory,
    "mac": MacFactory,
}


def factory_for(os_name: str) -> GUIFactory:
    """Pick the widget family for an operating system name."""
    factory_class = FACTORIES.get(os_name.lower())
    if factory_class is None:
        raise ConfigurationError(
            f"Unknown operating system '{os_name}'. Must be one of: {sorted(FACTORIES)}"
        )
    return factory_class()


class Application:
    """Client: works only through the abstract factory and products."""

    def __init__(self, factory: GUIFactory):
        self.button = factory.create_button()
        self.checkbox = factory.create_checkbox()

    def paint(self) -> List[str]:
        return [self.button.paint(), self.checkbox.paint()]


def run_demo(output: Callable[[str], None] = print) -> None:
    for os_name in ("windows", "mac"):
        output(f"{os_name}:")
        for line in Application(factory_for(os_name)).paint():
            output(f"  {line}")
