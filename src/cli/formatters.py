"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialization
- Rich tables for demo listings and demo details
- Plain list formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table

from src.config.defaults import OutputFormat


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == OutputFormat.YAML.value:
        return yaml.dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == OutputFormat.TABLE.value:
        return format_table_output(data)
    elif format_type == OutputFormat.LIST.value:
        return format_list_output(data)
    else:
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_table(data["demos"])
    elif isinstance(data, dict):
        return format_details_table(data)
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "demos" in data:
        return format_demos_list(data["demos"])
    elif isinstance(data, dict):
        return "\n".join(f"{key}: {value}" for key, value in data.items())
    else:
        return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_demos_table(demos: List[Dict[str, Any]]) -> str:
    """Format demo registrations as a table."""
    if not demos:
        return "No demos found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Summary")

    for demo in demos:
        table.add_row(
            str(demo.get("name", "N/A")),
            str(demo.get("category", "N/A")),
            str(demo.get("summary", "")),
        )
    return _render(table)


def format_details_table(details: Dict[str, Any]) -> str:
    """Format a single record as a two-column field/value table."""
    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")

    for key, value in details.items():
        table.add_row(str(key), str(value))
    return _render(table)


def format_demos_list(demos: List[Dict[str, Any]]) -> str:
    """Format demo registrations as an indented list."""
    if not demos:
        return "No demos found."

    lines = []
    for demo in demos:
        lines.append(f"{demo.get('name')} ({demo.get('category')})")
        lines.append(f"  {demo.get('summary', '')}")
    return "\n".join(lines)
