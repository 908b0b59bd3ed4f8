"""Repair of escaped process names.

``lsof`` prints bytes it considers unprintable in command names as ``\\xHH``
escapes (``Google\\x20Chrome`` for ``Google Chrome``). Output decoded with the
wrong code page carries U+FFFD replacement glyphs instead; those cannot be
recovered and are shown as a fixed placeholder.
"""

import re
from typing import Final

UNKNOWN_NAME_PLACEHOLDER: Final = "unknown"
REPLACEMENT_CHAR: Final = "\ufffd"

_ESCAPE_RE: Final = re.compile(r"\\x([0-9A-Fa-f]{2})")
BACKSLASH: Final = 0x5C


def _unescape(match: re.Match[str]) -> str:
    value = int(match.group(1), 16)
    # A decoded backslash would start a new escape
    if value == BACKSLASH:
        return match.group(0)
    return chr(value)


def decode_process_name(name: str) -> str:
    """Decode ``\\xHH`` escapes and mask replacement glyphs in a process name.

    Decoding repeats until no decodable escape is left, so escapes assembled
    from decoded characters are resolved as well and a decoded name decodes
    to itself. ``\\x5c`` is kept as written. Never raises. Names without
    escapes or replacement glyphs are returned unchanged.
    """
    while "\\x" in name:
        decoded = _ESCAPE_RE.sub(_unescape, name)
        if decoded == name:
            break
        name = decoded
    return name.replace(REPLACEMENT_CHAR, UNKNOWN_NAME_PLACEHOLDER)
