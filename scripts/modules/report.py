import json
from typing import Any, Dict, List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from parsed_config.core.value_kind import ValueKind
from parsed_config.registry import ConfigRegistry

def build_report(registry: ConfigRegistry) -> List[Dict[str, Any]]:
    """Collect every representation of each registry value"""
    rows = []
    for name in registry.keys():
        value = registry.values[name]
        rows.append({
            "name": name,
            "original": value.original,
            "list": value.get_as(ValueKind.LIST),
            "map": value.get_as(ValueKind.MAP),
            "boolean": value.as_boolean,
            "integer": value.as_integer,
        })
    return rows

def _format_cell(value: Any) -> str:
    if value is None:
        return "[dim]-[/dim]"
    return escape(repr(value))

def print_report(report: List[Dict[str, Any]], console: Console) -> None:
    """Print representations as a Rich table"""
    table = Table(title="Parsed Config Values")
    table.add_column("Property", style="cyan")
    table.add_column("Original", style="green")
    table.add_column("List")
    table.add_column("Map")
    table.add_column("Boolean", justify="center")
    table.add_column("Integer", justify="right")

    for row in report:
        table.add_row(
            row["name"],
            escape(repr(row["original"])),
            _format_cell(row["list"]),
            _format_cell(row["map"]),
            _format_cell(row["boolean"]),
            _format_cell(row["integer"])
        )

    console.print(table)

def print_json_report(report: List[Dict[str, Any]], console: Console) -> None:
    """Print representations as JSON"""
    console.print_json(json.dumps(report, default=str))
