"""Data model shared by the collectors and the command line."""

from dataclasses import dataclass
from enum import Enum


class Protocol(str, Enum):
    """Transport protocol of a bound socket."""

    TCP = "TCP"
    UDP = "UDP"

    def __str__(self) -> str:
        return self.value


@dataclass
class PortRecord:
    """A locally bound port and the process that owns it.

    Attributes:
        port: Local port number (1-65535)
        pid: Owning process id, never 0
        protocol: TCP or UDP
        process_name: Owning process name, empty when it could not be resolved
    """

    port: int
    pid: int
    protocol: Protocol
    process_name: str = ""

    @property
    def key(self) -> tuple[int, Protocol, int]:
        """Identity of the logical socket, used to collapse duplicate reports."""
        return (self.port, self.protocol, self.pid)
