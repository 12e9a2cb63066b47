"""Command context attached to errors reported by the command line."""

import argparse
from typing import Any, Dict, List, Optional, Sequence


class ExceptionContext:
    """Which handler and which command were running when a domain error surfaced."""

    def __init__(self, handler: str, command: Optional[str] = None, demos: Sequence[str] = ()):
        self.handler = handler
        self.command = command
        self.demos: List[str] = list(demos)

    @classmethod
    def from_handler_call(cls, handler: str, args: Sequence[Any]) -> "ExceptionContext":
        """Build the context from the positional arguments of a handler call."""
        namespace = next((a for a in args if isinstance(a, argparse.Namespace)), None)
        if namespace is None:
            return cls(handler)

        demos = getattr(namespace, "names", None) or []
        if getattr(namespace, "name", None):
            demos = [namespace.name]
        return cls(handler, getattr(namespace, "command", None), demos)

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary for logging; unset fields are left out."""
        data: Dict[str, Any] = {"handler": self.handler}
        if self.command:
            data["command"] = self.command
        if self.demos:
            data["demos"] = self.demos
        return data
