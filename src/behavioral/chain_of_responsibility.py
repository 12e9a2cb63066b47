"""Chain of Responsibility - pass a request along a chain until someone handles it.

Problem:
    A request can be handled by several objects, and which one should handle it
    depends on runtime state. Hard-wiring the choice into the sender couples it
    to every possible receiver.

Solution:
    Link the handlers into a chain. Each handler either processes the request
    or forwards it to the next one. Here the chain is the UI containment tree:
    a help request travels from a widget up through its containers.

Structure:
    - ``Component`` is the handler interface with a link to its container.
    - ``Container`` is a component that owns children and becomes their next link.
    - ``Button``, ``Panel`` and ``Dialog`` are concrete handlers; each answers
      with its own kind of help when it has some, otherwise defers upward.

Usage:
    - Requests of varying kinds must be processed in varying ways without
      knowing the receivers in advance.
    - Handlers must run in a particular order.
    - The set of handlers or their order changes at runtime.

Advantages:
    - Request handling order is controlled by how the chain is built.
    - Senders are decoupled from receivers (single responsibility).
    - New handlers are added without touching existing code (open/closed).

Disadvantages:
    - A request may fall off the end of the chain unhandled.
"""
from typing import Callable, List, Optional

from src.domain.core.exceptions import UnhandledRequestError


class Component:
    """Handler in the help chain."""

    def __init__(self, name: str, tooltip: str = ""):
        self.name = name
        self.tooltip = tooltip
        self.container: Optional["Container"] = None

    def set_container(self, container: Optional["Container"]) -> None:
        self.container = container

    def show_help(self) -> str:
        if self.tooltip:
            return f"Show tooltip: {self.tooltip}"
        if self.container is not None:
            return self.container.show_help()
        raise UnhandledRequestError("help", self.name)


class Container(Component):
    def __init__(self, name: str, tooltip: str = ""):
        super().__init__(name, tooltip)
        self.children: List[Component] = []

    def add(self, child: Component) -> None:
        self.children.append(child)
        child.set_container(self)


class Button(Component):
    pass


class Panel(Container):
    """Container that can answer with modal help text."""

    def __init__(self, name: str, modal_help_text: str = ""):
        super().__init__(name)
        self.modal_help_text = modal_help_text

    def show_help(self) -> str:
        if self.modal_help_text:
            return f"Show modal help: {self.modal_help_text}"
        return super().show_help()


class Dialog(Container):
    """Top-level container that can point at a wiki page."""

    def __init__(self, name: str, wiki_page_url: str = ""):
        super().__init__(name)
        self.wiki_page_url = wiki_page_url

    def show_help(self) -> str:
        if self.wiki_page_url:
            return f"Open wiki page: {self.wiki_page_url}"
        return super().show_help()


def run_demo(output: Callable[[str], None] = print) -> None:
    dialog = Dialog("Budget Reports", "https://en.wikipedia.org/wiki/Chain-of-responsibility_pattern")
    panel = Panel("Summary", "This panel shows the report summary")
    ok_button = Button("OK", tooltip="Confirms the report")
    cancel_button = Button("Cancel")
    plain_panel = Panel("Details")
    details_button = Button("Export")

    panel.add(ok_button)
    panel.add(cancel_button)
    plain_panel.add(details_button)
    dialog.add(panel)
    dialog.add(plain_panel)

    # Each request stops at the first component able to answer.
    output(f"OK: {ok_button.show_help()}")
    output(f"Cancel: {cancel_button.show_help()}")
    output(f"Export: {details_button.show_help()}")
