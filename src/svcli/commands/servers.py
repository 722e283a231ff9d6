# src/svcli/commands/servers.py
"""
Rendering of resolved servers.
"""
from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table

from svcli.models import Server


def servers_action(servers: Sequence[Server], console: Optional[Console] = None) -> None:
    """
    Print *servers* as a table (ID, URL, Username).
    """
    console = console or Console()

    if not servers:
        console.print("[yellow]No servers resolved.[/yellow]")
        return

    table = Table(title="Target Servers")
    table.add_column("ID", style="cyan")
    table.add_column("URL", style="green")
    table.add_column("Username", style="cyan")

    for srv in servers:
        table.add_row(
            srv.id,
            srv.url or "",
            srv.credentials.username if srv.credentials else "-",
        )

    console.print(table)
