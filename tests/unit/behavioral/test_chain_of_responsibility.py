"""Tests for the help chain of UI components."""

import pytest

from src.behavioral.chain_of_responsibility import Button, Dialog, Panel, run_demo
from src.domain.core.exceptions import UnhandledRequestError


class TestHelpChain:
    """Test how help requests travel up the container chain."""

    def setup_method(self):
        """Set up test fixtures."""
        self.dialog = Dialog("Dialog", "http://wiki/dialog")
        self.panel = Panel("Panel", "Panel help")
        self.dialog.add(self.panel)

    def test_component_with_tooltip_handles_request(self):
        button = Button("OK", tooltip="Confirm")
        self.panel.add(button)
        assert button.show_help() == "Show tooltip: Confirm"

    def test_request_passed_to_panel(self):
        """A component without help defers to its container."""
        button = Button("Cancel")
        self.panel.add(button)
        assert button.show_help() == "Show modal help: Panel help"

    def test_request_passed_to_dialog(self):
        """Containers without help of their own pass the request further up."""
        plain_panel = Panel("Plain")
        button = Button("Export")
        plain_panel.add(button)
        self.dialog.add(plain_panel)
        assert button.show_help() == "Open wiki page: http://wiki/dialog"

    def test_unhandled_request_raises(self):
        """The end of the chain without a handler is an error."""
        button = Button("Orphan")
        with pytest.raises(UnhandledRequestError) as exc_info:
            button.show_help()
        assert exc_info.value.origin == "Orphan"

    def test_add_sets_container(self):
        button = Button("OK")
        self.panel.add(button)
        assert button.container is self.panel
        assert self.panel.children == [button]

    def test_demo_output(self):
        lines = []
        run_demo(lines.append)
        assert lines == [
            "OK: Show tooltip: Confirms the report",
            "Cancel: Show modal help: This panel shows the report summary",
            "Export: Open wiki page: https://en.wikipedia.org/wiki/Chain-of-responsibility_pattern",
        ]
