"""Platform collectors and the parsing helpers they share."""

from .name_decoder import decode_process_name
from .normalize import deduplicate_ports, parse_port
from .runner import run_command
from .unix import collect_unix, parse_lsof
from .windows import collect_windows, parse_netstat, parse_tasklist

__all__ = [
    "collect_unix",
    "collect_windows",
    "decode_process_name",
    "deduplicate_ports",
    "parse_lsof",
    "parse_netstat",
    "parse_port",
    "parse_tasklist",
    "run_command",
]
