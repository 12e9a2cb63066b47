"""Tests for the event manager and its listeners."""

from unittest.mock import Mock

from src.behavioral.observer import (
    EmailAlertsListener,
    Editor,
    EventManager,
    LoggingListener,
    run_demo,
)


class TestEventManager:
    """Test subscription and notification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.events = EventManager()

    def test_notify_in_subscription_order(self):
        calls = []
        first = Mock(update=Mock(side_effect=lambda *a: calls.append("first")))
        second = Mock(update=Mock(side_effect=lambda *a: calls.append("second")))
        self.events.subscribe("save", first)
        self.events.subscribe("save", second)

        notified = self.events.notify("save", "file.txt")

        assert notified == 2
        assert calls == ["first", "second"]
        first.update.assert_called_once_with("save", "file.txt")

    def test_only_matching_event_type_notified(self):
        listener = Mock()
        self.events.subscribe("open", listener)
        assert self.events.notify("save", "file.txt") == 0
        listener.update.assert_not_called()

    def test_unsubscribe(self):
        listener = Mock()
        self.events.subscribe("save", listener)
        self.events.unsubscribe("save", listener)
        self.events.notify("save", "file.txt")
        listener.update.assert_not_called()

    def test_unsubscribe_unknown_listener_is_noop(self):
        self.events.unsubscribe("save", Mock())
        self.events.unsubscribe("never-seen", Mock())
        assert self.events.get_listener_counts() == {}

    def test_listener_counts(self):
        self.events.subscribe("open", Mock())
        self.events.subscribe("save", Mock())
        self.events.subscribe("save", Mock())
        assert self.events.get_listener_counts() == {"open": 1, "save": 2}


class TestEditorPublisher:
    """Test the editor as a publisher."""

    def test_editor_events(self):
        events = EventManager()
        lines = []
        events.subscribe("open", LoggingListener("app.log", lines.append))
        events.subscribe("close", EmailAlertsListener("ops@example.com", lines.append))

        editor = Editor(events)
        editor.open_file("notes.txt")
        editor.close_file()

        assert lines == [
            "Log app.log: someone has performed 'open' on notes.txt",
            "Email to ops@example.com: someone has performed 'close' on notes.txt",
        ]
        assert editor.filename == ""


def test_demo_output():
    lines = []
    run_demo(lines.append)
    assert lines == [
        "Log audit.log: someone has performed 'open' on test.txt",
        "Log audit.log: someone has performed 'save' on test.txt",
        "Email to admin@example.com: someone has performed 'save' on test.txt",
        "Email to admin@example.com: someone has performed 'save' on test.txt",
    ]
