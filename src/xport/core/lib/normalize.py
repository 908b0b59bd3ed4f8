"""Normalization of tentative records: address parsing and deduplication."""

from collections.abc import Iterable

from xport.core.models import PortRecord, Protocol


def deduplicate_ports(records: Iterable[PortRecord]) -> list[PortRecord]:
    """Keep the first record per (port, protocol, pid) and sort by port.

    Both netstat and lsof list a socket once per address family or file
    descriptor, so the same logical socket commonly appears several times.

    Args:
        records: Tentative records in collection order

    Returns:
        list[PortRecord]: Unique records, ascending by port, ties in input order
    """
    seen: set[tuple[int, Protocol, int]] = set()
    unique: list[PortRecord] = []
    for record in records:
        if record.key in seen:
            continue
        seen.add(record.key)
        unique.append(record)
    return sorted(unique, key=lambda r: r.port)


def parse_port(address: str) -> int | None:
    """Extract the port from ``host:port`` or ``[v6-host]:port``.

    Returns:
        int | None: The port, or None when the address carries no valid port
    """
    _, sep, port_str = address.rpartition(":")
    if not sep or not (port_str.isascii() and port_str.isdigit()):
        return None
    port = int(port_str)
    if not 1 <= port <= 65535:
        return None
    return port
