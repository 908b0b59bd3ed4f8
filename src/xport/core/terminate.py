"""Forced termination of the process owning a port.

Two paths are tried in order:
- A direct kill through psutil (SIGKILL on Unix, TerminateProcess on Windows)
- The platform kill utility (``taskkill /F /PID`` or ``kill -9``)

Success only means the kill request was accepted. The process may still be
exiting when this returns, so callers that need to confirm it is gone should
enumerate the ports again.

Example:
    try:
        await terminate_process(4321)
    except TerminationError as e:
        console.print(f"[red]Failed to stop process: {e.cause}")
"""

from typing import Final

import psutil
from loguru import logger

from xport.core.exceptions import CommandError, TerminationError
from xport.core.lib.runner import run_command
from xport.core.platform import Platform, detect_platform

TASKKILL_COMMAND: Final = ("taskkill", "/F", "/PID")
KILL_COMMAND: Final = ("kill", "-9")


def fallback_command(pid: int, platform: Platform) -> list[str]:
    """Return the kill utility invocation for ``pid`` on ``platform``."""
    base = TASKKILL_COMMAND if platform is Platform.WINDOWS else KILL_COMMAND
    return [*base, str(pid)]


async def terminate_process(pid: int, system: str | None = None) -> None:
    """Forcibly terminate a process.

    Args:
        pid: Process id to kill, must be positive
        system: Platform identifier, defaults to the running interpreter's

    Raises:
        TerminationError: If both the direct kill and the kill utility failed
    """
    if pid < 1:
        # kill -9 0 and kill -9 -1 signal whole process groups
        raise TerminationError(pid, ValueError(f"Invalid PID {pid}"))

    try:
        psutil.Process(pid).kill()
    except (psutil.Error, OSError) as e:
        logger.warning(f"Direct kill of PID {pid} failed ({e}), falling back to kill utility")
    else:
        logger.info(f"Sent kill signal to PID {pid}")
        return

    command = fallback_command(pid, detect_platform(system))
    try:
        await run_command(command)
    except CommandError as e:
        logger.error(f"Could not terminate PID {pid}: {e}")
        raise TerminationError(pid, e) from e
    logger.info(f"Terminated PID {pid} with {command[0]}")
