"""Observer - let objects subscribe to events published by another object.

Problem:
    Several parts of an application care when a document is opened or saved.
    Polling wastes effort, and having the editor call each interested party
    couples it to all of them.

Solution:
    The publisher keeps a list of subscribers per event type and notifies them
    through a common interface. Subscribers join and leave at runtime.

Structure:
    - ``EventManager`` stores subscribers and notifies them.
    - ``Editor`` is the publisher; it owns an event manager.
    - ``EventListener`` is the subscriber interface.
    - ``LoggingListener`` and ``EmailAlertsListener`` are concrete subscribers.

Usage:
    - Changes to one object require changing others, and the set of those
      objects is unknown in advance or changes dynamically.
    - Some objects must observe others only for a limited time.

Advantages:
    - New subscribers are introduced without changing the publisher (open/closed).
    - Relations between objects are established at runtime.

Disadvantages:
    - Subscribers are notified in subscription order, which callers cannot otherwise control.
"""
from typing import Any, Callable, Dict, List, Protocol

from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class EventListener(Protocol):
    def update(self, event_type: str, data: Any) -> None:
        ...


class EventManager:
    """Keeps subscribers per event type and notifies them in subscription order."""

    def __init__(self):
        self._listeners: Dict[str, List[EventListener]] = {}

    def subscribe(self, event_type: str, listener: EventListener) -> None:
        if event_type not in self._listeners:
            self._listeners[event_type] = []
        self._listeners[event_type].append(listener)
        logger.debug("Subscribed listener", event_type=event_type, listener=type(listener).__name__)

    def unsubscribe(self, event_type: str, listener: EventListener) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def notify(self, event_type: str, data: Any) -> int:
        """Notify every subscriber of ``event_type``; return how many were notified."""
        listeners = list(self._listeners.get(event_type, []))
        for listener in listeners:
            listener.update(event_type, data)
        return len(listeners)

    def get_listener_counts(self) -> Dict[str, int]:
        return {event_type: len(listeners) for event_type, listeners in self._listeners.items()}


class Editor:
    def __init__(self, events: EventManager):
        self.events = events
        self.filename: str = ""

    def open_file(self, filename: str) -> None:
        self.filename = filename
        self.events.notify("open", filename)

    def save_file(self) -> None:
        self.events.notify("save", self.filename)

    def close_file(self) -> None:
        self.events.notify("close", self.filename)
        self.filename = ""


class LoggingListener:
    def __init__(self, log_name: str, output: Callable[[str], None] = print):
        self.log_name = log_name
        self._output = output

    def update(self, event_type: str, data: Any) -> None:
        self._output(f"Log {self.log_name}: someone has performed '{event_type}' on {data}")


class EmailAlertsListener:
    def __init__(self, email: str, output: Callable[[str], None] = print):
        self.email = email
        self._output = output

    def update(self, event_type: str, data: Any) -> None:
        self._output(f"Email to {self.email}: someone has performed '{event_type}' on {data}")


def run_demo(output: Callable[[str], None] = print) -> None:
    events = EventManager()
    logging_listener = LoggingListener("audit.log", output)
    email_listener = EmailAlertsListener("admin@example.com", output)

    events.subscribe("open", logging_listener)
    events.subscribe("save", logging_listener)
    events.subscribe("save", email_listener)

    editor = Editor(events)
    editor.open_file("test.txt")
    editor.save_file()

    events.unsubscribe("save", logging_listener)
    editor.save_file()
    editor.close_file()
