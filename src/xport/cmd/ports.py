"""Rendering of port snapshots and kill confirmations.

This module turns ``PortRecord`` lists into Rich output:
- A table of bound ports with protocol, PID and process name
- Confirmation prompts before a process is killed
- Result lines for successful and failed kills

Example:
    records = asyncio.run(enumerate_ports())
    show_ports(records)
"""

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from rich.table import Table

from xport.core.models import PortRecord, Protocol

console = Console()

PROTOCOL_STYLES = {
    Protocol.TCP: "green",
    Protocol.UDP: "magenta",
}


def display_name(record: PortRecord) -> str:
    """Process name for display, with a dash when it is unknown."""
    return record.process_name or "-"


def build_ports_table(records: list[PortRecord], query: str = "") -> Table:
    """Build the table listing ``records``."""
    title = "Bound Ports"
    if query:
        title = f"{title} matching '{escape(query)}'"

    table = Table(title=title, caption=f"Total: {len(records)}")
    table.add_column("Port", style="cyan", justify="right")
    table.add_column("Protocol")
    table.add_column("PID", style="yellow", justify="right")
    table.add_column("Process", style="bold")

    for record in records:
        style = PROTOCOL_STYLES.get(record.protocol, "white")
        table.add_row(
            str(record.port),
            f"[{style}]{record.protocol.value}[/{style}]",
            str(record.pid),
            escape(display_name(record)),
        )
    return table


def show_ports(records: list[PortRecord], query: str = "") -> None:
    """Print ``records`` as a table, or a notice when there are none."""
    if not records:
        if query:
            console.print(f"[yellow]No bound ports match '{escape(query)}'")
        else:
            console.print("[yellow]No bound ports found")
        return
    console.print(build_ports_table(records, query))


def confirm_kill(pid: int, name: str) -> bool:
    """Ask the user to confirm stopping a process."""
    return Confirm.ask(f"Stop process [bold]{escape(name)}[/bold] (PID: {pid})?", console=console, default=False)


def report_stopped(pid: int, name: str) -> None:
    """Print the success line for a stopped process."""
    console.print(f"[green]Process {escape(name)} (PID: {pid}) stopped")


def report_failed(cause: BaseException) -> None:
    """Print why stopping a process failed."""
    console.print(f"[red]Failed to stop process: {escape(str(cause))}")
