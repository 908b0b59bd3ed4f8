"""Operating system family detection.

Only two collector strategies exist, so every platform identifier must land
in one of them. Anything that is not Windows is treated as Unix-like, which
covers Linux, macOS and the BSDs as long as ``lsof`` is installed.

Example:
    detect_platform("win32")   # Platform.WINDOWS
    detect_platform("darwin")  # Platform.UNIX
"""

import sys
from enum import Enum


class Platform(str, Enum):
    """Operating system family, one per collector."""

    WINDOWS = "windows"
    UNIX = "unix"


def detect_platform(system: str | None = None) -> Platform:
    """Return the platform family for a ``sys.platform`` style identifier.

    Args:
        system: Platform identifier, defaults to the running interpreter's

    Returns:
        Platform: WINDOWS for ``win*`` identifiers, UNIX for everything else
    """
    if system is None:
        system = sys.platform
    if system.lower().startswith("win"):
        return Platform.WINDOWS
    return Platform.UNIX
