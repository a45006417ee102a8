"""``pinreport pins`` — list the trusted pin fingerprints."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from pinreport.core.trust_store import default_trust_store

console = Console()


def pins_cmd() -> None:
    """Show the pins trusted for the API endpoint and its proxies."""
    store = default_trust_store()

    table = Table(title=f"Trusted Pins ({len(store)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Label", style="cyan")
    table.add_column("Pin", style="green", overflow="fold")

    for index, pin in enumerate(store.pins, start=1):
        table.add_row(str(index), pin.label or "-", pin.token)

    console.print(table)
