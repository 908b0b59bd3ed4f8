"""Custom exceptions for port discovery and process termination.

Two tiers of failure exist:
- Collection failures (``CommandError``) are raised by the command runner and
  always handled inside the collectors, which degrade to empty or partial
  results.
- Termination failures (``TerminationError``) are surfaced to the caller,
  since stopping a process is a user-initiated action whose outcome must be
  reported.

Example:
    try:
        await terminate_process(4321)
    except TerminationError as e:
        console.print(f"[red]Failed to stop process: {e.cause}")
"""

from collections.abc import Sequence


class PortManagerError(Exception):
    """Base exception for xport errors."""


class CommandError(PortManagerError):
    """Raised when an external utility cannot be spawned or exits non-zero."""

    def __init__(self, command: Sequence[str], returncode: int | None = None, stderr: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr.strip()
        if returncode is None:
            msg = f"Could not run {self.command[0]}"
        else:
            msg = f"{' '.join(self.command)} exited with status {returncode}"
        if self.stderr:
            msg = f"{msg}: {self.stderr}"
        super().__init__(msg)


class TerminationError(PortManagerError):
    """Raised when neither the direct kill nor the fallback command stopped a process."""

    def __init__(self, pid: int, cause: BaseException) -> None:
        self.pid = pid
        self.cause = cause
        super().__init__(f"Could not terminate PID {pid}: {cause}")
