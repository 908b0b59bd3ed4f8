"""Asynchronous execution of the system utilities that feed the collectors.

There is deliberately no timeout: a hung utility hangs the enumeration that
awaits it.
"""

import asyncio
from collections.abc import Sequence

from loguru import logger

from xport.core.exceptions import CommandError


async def run_command(command: Sequence[str], encoding: str = "utf-8") -> str:
    """Run a command and return its decoded standard output.

    Args:
        command: Program and arguments, executed without a shell
        encoding: Encoding of the program output, undecodable bytes become U+FFFD

    Returns:
        str: Standard output of the command

    Raises:
        CommandError: If the program cannot be started or exits non-zero
    """
    logger.debug(f"Running {' '.join(command)}")
    try:
        proc = await asyncio.create_subprocess_exec(
            *command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise CommandError(command, stderr=str(e)) from e

    stdout, stderr = await proc.communicate()
    if proc.returncode != 0:
        raise CommandError(command, proc.returncode, stderr.decode(encoding, errors="replace"))
    return stdout.decode(encoding, errors="replace")
