"""Rich output formatting helpers for the registry CLI.

Provides consistent, status-colored terminal output for tool lists,
single-tool details and status summaries.

Status Color Mapping:
    active = bold green, unconfigured = yellow, broken = bold red,
    archived = dim
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mcp_tools_registry.discovery import LifecycleStatus, ToolRecord

_STATUS_STYLES: dict[LifecycleStatus, str] = {
    LifecycleStatus.ACTIVE: "bold green",
    LifecycleStatus.UNCONFIGURED: "yellow",
    LifecycleStatus.BROKEN: "bold red",
    LifecycleStatus.ARCHIVED: "dim",
}

console = Console()


def status_style(status: LifecycleStatus) -> str:
    """Return the Rich style string for a lifecycle status."""
    return _STATUS_STYLES.get(status, "white")


def status_text(status: LifecycleStatus) -> Text:
    return Text(status.value, style=status_style(status))


def print_tool_list(records: list[ToolRecord]) -> None:
    """Print a table of tools.

    Args:
        records: Records to show, already filtered and sorted.
    """
    if not records:
        console.print("[dim]No MCP tools found.[/dim]")
        return

    table = Table(title="MCP Tools", show_header=True, header_style="bold")
    table.add_column("Tool", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Configured", justify="center")
    table.add_column("Version", style="dim")
    table.add_column("Tools", justify="right")
    table.add_column("Notes")

    for record in records:
        configured = Text("yes", style="green") if record.is_configured else Text("no", style="dim")
        notes = record.diagnostic or record.description or ""
        table.add_row(
            record.identifier,
            status_text(record.status),
            configured,
            record.version or "-",
            str(len(record.capabilities)),
            notes,
        )

    console.print(table)
    console.print(f"[bold]{len(records)}[/bold] tools")


def print_tool_detail(record: ToolRecord) -> None:
    """Print detailed output for a single tool.

    Args:
        record: The tool to show.
    """
    header = Text.assemble(
        ("Tool: ", "bold"), (record.identifier, ""),
        ("  Status: ", "bold"), status_text(record.status),
    )
    console.print(Panel(header, title="MCP Tool"))
    console.print(f"  Path:          {record.location}")
    console.print(f"  Config key:    {record.short_identifier}")
    console.print(f"  Configured:    {'yes' if record.is_configured else 'no'}")
    console.print(f"  Version:       {record.version or '-'}")
    console.print(f"  Description:   {record.description or '-'}")
    console.print(f"  Last modified: {record.last_modified.isoformat()}")
    if record.diagnostic:
        console.print(f"  [red]Error:         {record.diagnostic}[/red]")

    if record.capabilities:
        cap_table = Table(title="Discovered Tools", show_header=True)
        cap_table.add_column("#", justify="right", style="dim")
        cap_table.add_column("Name", style="bold")
        for index, name in enumerate(record.capabilities, start=1):
            cap_table.add_row(str(index), name)
        console.print(cap_table)


def print_summary(summary: dict[str, Any]) -> None:
    """Print status counts and the tools in each status.

    Args:
        summary: Dictionary from ``ToolRegistry.summary()``.
    """
    counts = summary.get("summary", {})
    details = summary.get("details", {})

    table = Table(title="MCP Tools Summary", show_header=True)
    table.add_column("Status", style="bold")
    table.add_column("Count", justify="right")
    for status in LifecycleStatus:
        table.add_row(status_text(status), str(counts.get(status.value, 0)))
    table.add_row("configured", str(counts.get("configured", 0)))
    table.add_row(Text("total", style="bold"), str(counts.get("total", 0)))
    console.print(table)

    broken = details.get("broken", [])
    if broken:
        console.print("[bold red]Broken:[/bold red]")
        for entry in broken:
            console.print(f"  [red]- {entry['name']}: {entry['error'] or 'unknown error'}[/red]")
    unconfigured = details.get("unconfigured", [])
    if unconfigured:
        console.print("[yellow]Unconfigured:[/yellow] " + ", ".join(unconfigured))
