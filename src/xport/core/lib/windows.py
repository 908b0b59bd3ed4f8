"""Port collection on Windows from ``netstat -ano`` and ``tasklist``.

``netstat -ano`` lists sockets with their owning PID but no process name::

    Proto  Local Address          Foreign Address        State           PID
    TCP    0.0.0.0:135            0.0.0.0:0              LISTENING       1234
    TCP    [::]:445               [::]:0                 LISTENING       4
    UDP    0.0.0.0:5353           *:*                                    2468

Every row needs five fields. UDP rows printed without a State column, as
above, have four and are skipped.

Names come from ``tasklist /FO CSV /NH`` and are joined by PID::

    "chrome.exe","1234","Console","1","12,345 K"

Both utilities can fail independently. A failed ``netstat`` yields no
records, a failed ``tasklist`` yields records with empty names.
"""

import re
from typing import Final

from loguru import logger

from xport.core.exceptions import CommandError
from xport.core.lib.name_decoder import decode_process_name
from xport.core.lib.normalize import deduplicate_ports, parse_port
from xport.core.lib.runner import run_command
from xport.core.models import PortRecord, Protocol

NETSTAT_COMMAND: Final = ("netstat", "-ano")
TASKLIST_COMMAND: Final = ("tasklist", "/FO", "CSV", "/NH")

MIN_NETSTAT_FIELDS: Final = 5
LISTENING_STATE: Final = "LISTENING"

_QUOTED_FIELD_RE: Final = re.compile(r'"([^"]*)"')


def _parse_protocol(field: str) -> Protocol | None:
    upper = field.upper()
    if upper.startswith("TCP"):
        return Protocol.TCP
    if upper.startswith("UDP"):
        return Protocol.UDP
    return None


def parse_netstat_line(line: str) -> PortRecord | None:
    """Parse one ``netstat -ano`` row into a tentative record.

    Returns:
        PortRecord | None: The record, or None for headers, short rows,
            non-listening TCP sockets, rows without a numeric PID and the idle
            process (PID 0)
    """
    parts = line.split()
    if len(parts) < MIN_NETSTAT_FIELDS:
        return None

    protocol = _parse_protocol(parts[0])
    if protocol is None:
        return None

    pid_str = parts[-1]
    if not (pid_str.isascii() and pid_str.isdigit()):
        return None

    if protocol is Protocol.TCP and parts[3].upper() != LISTENING_STATE:
        return None

    pid = int(pid_str)
    if pid == 0:
        return None

    port = parse_port(parts[1])
    if port is None:
        return None

    return PortRecord(port=port, pid=pid, protocol=protocol)


def parse_netstat(output: str) -> list[PortRecord]:
    """Parse full ``netstat -ano`` output, skipping every unusable row."""
    records = []
    for line in output.splitlines():
        record = parse_netstat_line(line)
        if record is not None:
            records.append(record)
    return records


def parse_tasklist(output: str) -> dict[int, str]:
    """Build a PID to image name map from ``tasklist /FO CSV /NH`` output."""
    names: dict[int, str] = {}
    for line in output.splitlines():
        fields = _QUOTED_FIELD_RE.findall(line)
        if len(fields) < 2 or not (fields[1].isascii() and fields[1].isdigit()):
            continue
        names[int(fields[1])] = fields[0]
    return names


async def collect_windows() -> list[PortRecord]:
    """Collect bound ports on Windows.

    Returns:
        list[PortRecord]: Unique records sorted by port, empty if netstat fails
    """
    try:
        output = await run_command(NETSTAT_COMMAND)
    except CommandError as e:
        logger.warning(f"netstat failed, no ports collected: {e}")
        return []

    records = deduplicate_ports(parse_netstat(output))
    logger.debug(f"netstat reported {len(records)} bound ports")

    try:
        names = parse_tasklist(await run_command(TASKLIST_COMMAND))
    except CommandError as e:
        logger.warning(f"tasklist failed, process names unavailable: {e}")
        return records

    for record in records:
        if record.pid in names:
            record.process_name = decode_process_name(names[record.pid])
    return records
