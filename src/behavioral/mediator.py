"""Mediator - route communication between components through one object.

Problem:
    The widgets of an authentication dialog depend on each other: ticking a
    checkbox reveals other fields, clicking a button validates several inputs.
    When widgets reference each other directly they cannot be reused anywhere else.

Solution:
    Components stop talking to each other and instead notify a mediator. The
    mediator owns the components and decides how each notification ripples
    through the rest of the dialog.

Structure:
    - ``Mediator`` declares ``notify(sender, event)``.
    - ``AuthenticationDialog`` is the concrete mediator owning every widget.
    - ``Button``, ``Checkbox`` and ``Textbox`` are components that only know
      their mediator.

Usage:
    - Classes are hard to change because they are tightly coupled to many others.
    - A component cannot be reused in another context because of its dependencies.
    - Many subclasses exist only to tweak behaviour in a single context.

Advantages:
    - Communication lives in one place (single responsibility).
    - New mediators are introduced without changing components (open/closed).
    - Components become reusable.

Disadvantages:
    - The mediator can grow into a god object.
"""
from typing import Callable, List, Optional, Protocol


class Mediator(Protocol):
    def notify(self, sender: object, event: str) -> None:
        ...


class Component:
    def __init__(self, title: str, mediator: Optional[Mediator] = None):
        self.title = title
        self.mediator = mediator

    def _notify(self, event: str) -> None:
        if self.mediator is not None:
            self.mediator.notify(self, event)


class Button(Component):
    def click(self) -> None:
        self._notify("click")


class Checkbox(Component):
    def __init__(self, title: str, mediator: Optional[Mediator] = None):
        super().__init__(title, mediator)
        self.checked = False

    def check(self) -> None:
        self.checked = not self.checked
        self._notify("check")


class Textbox(Component):
    def __init__(self, title: str, mediator: Optional[Mediator] = None):
        super().__init__(title, mediator)
        self.text = ""
        self.visible = True

    def type_text(self, text: str) -> None:
        self.text = text
        self._notify("keypress")


class AuthenticationDialog:
    """Concrete mediator for a combined login / register dialog."""

    def __init__(self, output: Callable[[str], None] = print):
        self._output = output
        self.title = "Log in"
        self.login_or_register = Checkbox("Register a new account", self)
        self.login_username = Textbox("Username", self)
        self.login_password = Textbox("Password", self)
        self.registration_username = Textbox("Username", self)
        self.registration_password = Textbox("Password", self)
        self.registration_email = Textbox("Email", self)
        self.ok_button = Button("OK", self)
        self.cancel_button = Button("Cancel", self)
        self.events: List[str] = []
        self._apply_mode()

    @property
    def is_register_mode(self) -> bool:
        return self.login_or_register.checked

    def _apply_mode(self) -> None:
        registering = self.is_register_mode
        self.title = "Register" if registering else "Log in"
        for field in (self.login_username, self.login_password):
            field.visible = not registering
        for field in (self.registration_username, self.registration_password, self.registration_email):
            field.visible = registering

    def _report(self, message: str) -> None:
        self.events.append(message)
        self._output(message)

    def notify(self, sender: object, event: str) -> None:
        if sender is self.login_or_register and event == "check":
            self._apply_mode()
            self._report(f"Dialog switched to: {self.title}")
        elif sender is self.ok_button and event == "click":
            if self.is_register_mode:
                self._report(f"Registering account for {self.registration_username.text or '<empty>'}")
            else:
                self._report(f"Logging in as {self.login_username.text or '<empty>'}")
        elif sender is self.cancel_button and event == "click":
            self._report("Authentication cancelled")

    def show(self) -> None:
        self._report(f"Showing dialog: {self.title}")


def run_demo(output: Callable[[str], None] = print) -> None:
    dialog = AuthenticationDialog(output)
    dialog.show()
    dialog.login_username.type_text("john")
    dialog.ok_button.click()
    dialog.login_or_register.check()
    dialog.registration_username.type_text("jane")
    dialog.ok_button.click()
    dialog.cancel_button.click()
