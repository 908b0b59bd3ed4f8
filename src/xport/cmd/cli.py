"""Command-line interface for xport.

This module provides the ``xport`` command, handling:
- Listing bound ports with their owning processes
- Filtering the listing by port, process name or PID
- Stopping the process behind a PID or a port
- Debug logging

The CLI is built using Typer and Rich.

Example:
    # Run from command line:
    $ xport list --filter node
    $ xport kill 3000 --port
"""

import asyncio
import sys

import typer
from loguru import logger

from xport import __version__
from xport.cmd.ports import confirm_kill, console, display_name, report_failed, report_stopped, show_ports
from xport.core.exceptions import TerminationError
from xport.core.models import PortRecord
from xport.core.ports import enumerate_ports, filter_ports, find_by_port
from xport.core.terminate import terminate_process
from xport.core.utils.log_config import configure_logging

app = typer.Typer(help="Find which process holds a local port and stop it")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        default=False,
        help="Enable debug logging",
    ),
):
    """Show version information."""
    if debug:
        configure_logging(debug=True)
    if ctx.invoked_subcommand is None:
        console.print(f"[cyan]xport v{__version__}[/cyan]")


@app.command(name="list")
def list_ports(
    query: str = typer.Option("", "--filter", "-f", help="Only show ports whose port, process name or PID contains this text"),
):
    """List bound ports and the processes that own them."""
    records = asyncio.run(enumerate_ports())
    show_ports(filter_ports(records, query), query)


def _targets(records: list[PortRecord], target: int, by_port: bool) -> dict[int, str]:
    """Map the PIDs to stop onto their display names."""
    if by_port:
        return {r.pid: display_name(r) for r in find_by_port(records, target)}
    names = [display_name(r) for r in records if r.pid == target]
    return {target: names[0] if names else "-"}


@app.command(name="kill")
def kill(
    target: int = typer.Argument(..., help="PID to stop, or port with --port"),
    by_port: bool = typer.Option(False, "--port", "-p", help="Treat TARGET as a port and stop every process bound to it"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Forcibly stop a process."""
    records = asyncio.run(enumerate_ports())
    targets = _targets(records, target, by_port)
    if not targets:
        console.print(f"[red]No process is bound to port {target}")
        sys.exit(1)

    failed = False
    for pid, name in targets.items():
        if not yes and not confirm_kill(pid, name):
            console.print("[yellow]Cancelled")
            continue
        try:
            asyncio.run(terminate_process(pid))
        except TerminationError as e:
            logger.debug(f"Termination of PID {pid} failed: {e}")
            report_failed(e.cause)
            failed = True
        else:
            report_stopped(pid, name)

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    app()
