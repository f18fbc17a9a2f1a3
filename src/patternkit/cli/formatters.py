"""
CLI formatting functions.

Patterns are rendered as JSON, YAML or a Rich table captured to a string.
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_pattern_details(data["pattern"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_patterns_table(patterns: List[Dict[str, Any]]) -> str:
    """Format a list of patterns as a Rich table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Title", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Intent")

    for pattern in patterns:
        table.add_row(
            str(pattern.get("name", "N/A")),
            str(pattern.get("title", "N/A")),
            str(pattern.get("category", "N/A")),
            str(pattern.get("intent", "")),
        )

    return _render(table)


def format_pattern_details(pattern: Dict[str, Any]) -> str:
    """Format a single pattern as a two-column field/value table."""
    table = Table(show_header=False, show_lines=True)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    for field, value in pattern.items():
        table.add_row(field.replace("_", " ").title(), str(value))

    return _render(table)


def _render(table: Table) -> str:
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
