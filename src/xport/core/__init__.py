"""Core port discovery and process termination.

This package contains everything below the command line:
- Platform detection and the Windows and Unix collectors
- Parsing of ``netstat``, ``tasklist`` and ``lsof`` output
- Process name repair and record deduplication
- Forced process termination with a command fallback
- Exception types

The two public operations are ``enumerate_ports`` and ``terminate_process``.
"""

from .exceptions import CommandError, PortManagerError, TerminationError
from .models import PortRecord, Protocol
from .ports import enumerate_ports, filter_ports, find_by_port
from .terminate import terminate_process

__all__ = [
    "CommandError",
    "enumerate_ports",
    "filter_ports",
    "find_by_port",
    "PortManagerError",
    "PortRecord",
    "Protocol",
    "TerminationError",
    "terminate_process",
]
