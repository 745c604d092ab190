"""Parsing of 8.3 short file names and slash separated paths."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

SFN_LENGTH = 11
BASE_LENGTH = 8
DIR_SEPARATOR = "/"

_DIR_NT_LC_BASE = 0x08
_DIR_NT_LC_EXT = 0x10


class InvalidNameError(ValueError):
    """Raised when a path component is not a valid 8.3 name."""


class NameFlags(enum.IntFlag):
    """Case and conversion flags of a parsed name."""

    NONE = 0
    LOST_CHARS = 0x01
    MIXED_CASE = 0x02
    NEED_LFN = 0x03
    LC_BASE = _DIR_NT_LC_BASE
    LC_EXT = _DIR_NT_LC_EXT


@dataclass(frozen=True)
class ParsedName:
    """One path component in directory entry form.

    ``sfn`` is the eleven byte, space padded, upper case name; ``rest`` is
    the remainder of the path after the component and its separators.
    """

    sfn: bytes
    flags: NameFlags = NameFlags.NONE
    rest: str = ""

    @property
    def base(self) -> str:
        """The base name without padding."""
        return self.sfn[:BASE_LENGTH].decode("ascii").rstrip(" ")

    @property
    def extension(self) -> str:
        """The extension without padding."""
        return self.sfn[BASE_LENGTH:].decode("ascii").rstrip(" ")


def legal_83_char(c: Union[str, int]) -> bool:
    """Return True if ``c`` may appear in a short file name."""
    code = ord(c) if isinstance(c, str) else c
    if code in (ord('"'), ord("|")):
        return False
    # * + , . /
    if 0x2A <= code <= 0x2F and code != 0x2D:
        return False
    # : ; < = > ?
    if 0x3A <= code <= 0x3F:
        return False
    # [ \ ]
    if 0x5B <= code <= 0x5D:
        return False
    return 0x20 < code < 0x7F


def parse_short_name(path: str) -> ParsedName:
    """Parse the first component of ``path`` as an 8.3 name."""
    sfn = bytearray(b" " * SFN_LENGTH)
    upper = 0
    lower = 0
    bit = _DIR_NT_LC_BASE
    index = 0
    limit = BASE_LENGTH - 1
    consumed = 0
    for consumed, c in enumerate(path):
        if c == DIR_SEPARATOR:
            break
        if c == "." and limit == BASE_LENGTH - 1:
            limit = SFN_LENGTH - 1
            index = BASE_LENGTH
            bit = _DIR_NT_LC_EXT
            continue
        if not legal_83_char(c) or index > limit:
            raise InvalidNameError(f"invalid 8.3 name: {path!r}")
        if "a" <= c <= "z":
            c = c.upper()
            lower |= bit
        elif "A" <= c <= "Z":
            upper |= bit
        sfn[index] = ord(c)
        index += 1
    else:
        consumed = len(path)
    if sfn[0] == ord(" "):
        raise InvalidNameError(f"missing file name: {path!r}")
    flags = NameFlags(0 if lower & upper else lower)
    rest = path[consumed:].lstrip(DIR_SEPARATOR)
    return ParsedName(bytes(sfn), flags, rest)


def split_path(path: str) -> tuple[bool, list[ParsedName]]:
    """Split a path into parsed 8.3 components.

    Returns whether the path is absolute and the list of its components;
    the root path itself has no components.
    """
    absolute = path.startswith(DIR_SEPARATOR)
    remaining = path.lstrip(DIR_SEPARATOR)
    components: list[ParsedName] = []
    if absolute and not remaining:
        return True, components
    while True:
        parsed = parse_short_name(remaining)
        components.append(parsed)
        if not parsed.rest:
            return absolute, components
        remaining = parsed.rest