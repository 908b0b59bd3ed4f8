"""Port collection on Linux and macOS from ``lsof -i -P -n``.

Every row already carries the command name and PID::

    COMMAND     PID  USER   FD   TYPE             DEVICE SIZE/OFF NODE NAME
    loginwindow 104 guxiu   22u  IPv4 0x1c8d3e2f      0t0  TCP *:62985 (LISTEN)
    mDNSRespo   321 _mdns    7u  IPv4 0x2a9b4c1d      0t0  UDP *:5353

The column holding the protocol is not reliable enough to index, so TCP and
UDP are detected by substring search on the whole row. ``lsof`` exits 1 when
nothing matches, which is reported as an empty result.
"""

from typing import Final

from loguru import logger

from xport.core.exceptions import CommandError
from xport.core.lib.name_decoder import decode_process_name
from xport.core.lib.normalize import deduplicate_ports, parse_port
from xport.core.lib.runner import run_command
from xport.core.models import PortRecord, Protocol

LSOF_COMMAND: Final = ("lsof", "-i", "-P", "-n")

MIN_LSOF_FIELDS: Final = 9
LISTEN_MARKER: Final = "(LISTEN)"


def _local_address(parts: list[str]) -> str:
    """Return the local endpoint of the NAME column.

    A trailing ``(STATE)`` token is skipped, and for connected sockets
    (``local->remote``) only the local side is kept.
    """
    name = parts[-1]
    if name.startswith("(") and name.endswith(")"):
        name = parts[-2]
    return name.split("->", 1)[0]


def parse_lsof_line(line: str) -> PortRecord | None:
    """Parse one ``lsof`` data row into a tentative record.

    Returns:
        PortRecord | None: The record, or None for short rows, rows without a
            numeric PID, non-listening TCP sockets and rows without a port
    """
    parts = line.split()
    if len(parts) < MIN_LSOF_FIELDS:
        return None

    command, pid_str = parts[0], parts[1]
    if not (pid_str.isascii() and pid_str.isdigit()) or int(pid_str) == 0:
        return None

    is_tcp = "TCP" in line
    is_udp = "UDP" in line
    if not is_tcp and not is_udp:
        return None
    if is_tcp and LISTEN_MARKER not in line:
        return None

    port = parse_port(_local_address(parts))
    if port is None:
        return None

    return PortRecord(
        port=port,
        pid=int(pid_str),
        protocol=Protocol.UDP if is_udp else Protocol.TCP,
        process_name=decode_process_name(command),
    )


def parse_lsof(output: str) -> list[PortRecord]:
    """Parse full ``lsof`` output, skipping the header row."""
    records = []
    for line in output.splitlines()[1:]:
        record = parse_lsof_line(line)
        if record is not None:
            records.append(record)
    return records


async def collect_unix() -> list[PortRecord]:
    """Collect bound ports on Unix-like systems.

    Returns:
        list[PortRecord]: Unique records sorted by port, empty if lsof fails
    """
    try:
        output = await run_command(LSOF_COMMAND)
    except CommandError as e:
        logger.debug(f"lsof returned no sockets: {e}")
        return []

    records = deduplicate_ports(parse_lsof(output))
    logger.debug(f"lsof reported {len(records)} bound ports")
    return records
