"""Port enumeration entry point and record filtering.

This module exposes the read side of xport:
- ``enumerate_ports`` takes a snapshot of bound ports using the collector for
  the running platform
- ``filter_ports`` narrows a snapshot by a search string
- ``find_by_port`` picks the records bound to one port

Enumeration is best effort. Any failure while collecting degrades to an
empty list, so callers never need to guard it.

Example:
    records = asyncio.run(enumerate_ports())
    for record in filter_ports(records, "node"):
        print(record.port, record.pid)
"""

from collections.abc import Awaitable, Callable, Iterable

from loguru import logger

from xport.core.lib import collect_unix, collect_windows
from xport.core.models import PortRecord
from xport.core.platform import Platform, detect_platform

Collector = Callable[[], Awaitable[list[PortRecord]]]

COLLECTORS: dict[Platform, Collector] = {
    Platform.WINDOWS: collect_windows,
    Platform.UNIX: collect_unix,
}


async def enumerate_ports(system: str | None = None) -> list[PortRecord]:
    """Take a snapshot of the locally bound ports.

    Args:
        system: Platform identifier, defaults to the running interpreter's

    Returns:
        list[PortRecord]: Records unique by (port, protocol, pid), ascending by port
    """
    platform = detect_platform(system)
    collector = COLLECTORS[platform]
    try:
        records = await collector()
    except Exception:
        logger.exception(f"Port collection failed on {platform.value}")
        return []
    logger.debug(f"Collected {len(records)} ports on {platform.value}")
    return records


def filter_ports(records: Iterable[PortRecord], query: str) -> list[PortRecord]:
    """Keep records whose port, process name or PID contains ``query``.

    Matching is case-insensitive. An empty query keeps every record.
    """
    needle = query.lower()
    if not needle:
        return list(records)
    return [
        r
        for r in records
        if needle in str(r.port) or needle in r.process_name.lower() or needle in str(r.pid)
    ]


def find_by_port(records: Iterable[PortRecord], port: int) -> list[PortRecord]:
    """Return the records bound to ``port``."""
    return [r for r in records if r.port == port]
