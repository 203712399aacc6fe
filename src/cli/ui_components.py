"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import PinResult


def build_pin_table(result: PinResult) -> Table:
    """Two-column table describing a successful pin."""

    table = Table(title="Pinned", show_header=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("CID", result.cid)
    table.add_row("Gateway URL", result.gateway_url)
    table.add_row("File", result.filename)
    if result.pin_size is not None:
        table.add_row("Size", f"{result.pin_size} bytes")
    if result.timestamp:
        table.add_row("Timestamp", result.timestamp)
    if result.is_duplicate is not None:
        table.add_row("Duplicate", "yes" if result.is_duplicate else "no")
    return table


def build_error_panel(message: str) -> Panel:
    return Panel(Text(message, style="red"), title="Error", border_style="red")
