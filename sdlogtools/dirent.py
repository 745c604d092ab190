"""The 32-byte short directory entry and its name formatting."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from .shortname import BASE_LENGTH, SFN_LENGTH

ENTRY_SIZE = 32

DIR_NAME_FREE = 0x00
DIR_NAME_DELETED = 0xE5

DIR_ATT_READ_ONLY = 0x01
DIR_ATT_HIDDEN = 0x02
DIR_ATT_SYSTEM = 0x04
DIR_ATT_VOLUME_ID = 0x08
DIR_ATT_DIRECTORY = 0x10
DIR_ATT_ARCHIVE = 0x20
DIR_ATT_LONG_NAME = 0x0F
DIR_ATT_LONG_NAME_MASK = 0x3F

DIR_NT_LC_BASE = 0x08
DIR_NT_LC_EXT = 0x10


def dir_name(sfn: bytes, nt_flags: int = 0) -> str:
    """Format an eleven byte short name as ``BASE.EXT``.

    Padding spaces are dropped, and the base name or extension is shown in
    lower case when the matching bit of ``nt_flags`` is set.
    """
    if len(sfn) != SFN_LENGTH:
        raise ValueError(f"short name must be {SFN_LENGTH} bytes")
    parts: list[str] = []
    bit = DIR_NT_LC_BASE
    for i, byte in enumerate(sfn):
        if byte == ord(" "):
            continue
        if i == BASE_LENGTH:
            bit = DIR_NT_LC_EXT
            parts.append(".")
        c = chr(byte)
        if "A" <= c <= "Z" and bit & nt_flags:
            c = c.lower()
        parts.append(c)
    return "".join(parts)


@dataclass
class DirEntry:
    """A short directory entry, with all fields as stored on disk."""

    name: bytes = b" " * SFN_LENGTH
    attributes: int = 0
    reserved_nt: int = 0
    creation_time_tenths: int = 0
    creation_time: int = 0
    creation_date: int = 0
    last_access_date: int = 0
    first_cluster_high: int = 0
    last_write_time: int = 0
    last_write_date: int = 0
    first_cluster_low: int = 0
    file_size: int = 0

    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<11sBBBHHHHHHHI")

    def __post_init__(self) -> None:
        self.name = bytes(self.name)
        if len(self.name) != SFN_LENGTH:
            raise ValueError(f"name must be {SFN_LENGTH} bytes")

    @classmethod
    def unpack(cls, data: bytes) -> "DirEntry":
        """Decode a 32-byte directory entry."""
        if len(data) != ENTRY_SIZE:
            raise ValueError(f"a directory entry is {ENTRY_SIZE} bytes, got {len(data)}")
        return cls(*cls._FORMAT.unpack(bytes(data)))

    def pack(self) -> bytes:
        """Encode the entry as 32 bytes."""
        try:
            return self._FORMAT.pack(
                self.name,
                self.attributes,
                self.reserved_nt,
                self.creation_time_tenths,
                self.creation_time,
                self.creation_date,
                self.last_access_date,
                self.first_cluster_high,
                self.last_write_time,
                self.last_write_date,
                self.first_cluster_low,
                self.file_size,
            )
        except struct.error as exc:
            raise ValueError(f"directory entry field out of range: {exc}") from exc

    @property
    def first_cluster(self) -> int:
        """The first cluster number, joined from its two halves."""
        return (self.first_cluster_high << 16) | self.first_cluster_low

    @first_cluster.setter
    def first_cluster(self, value: int) -> None:
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError("cluster number must be an unsigned 32-bit value")
        self.first_cluster_high = value >> 16
        self.first_cluster_low = value & 0xFFFF

    @property
    def is_free(self) -> bool:
        """True for an entry that marks the end of the directory."""
        return self.name[0] == DIR_NAME_FREE

    @property
    def is_deleted(self) -> bool:
        """True for the entry of a removed file."""
        return self.name[0] == DIR_NAME_DELETED

    @property
    def is_dot(self) -> bool:
        """True for the ``.`` and ``..`` entries."""
        return self.name[0] == ord(".")

    @property
    def is_directory(self) -> bool:
        """True for a subdirectory entry."""
        return self.is_file_or_subdir() and bool(self.attributes & DIR_ATT_DIRECTORY)

    def display_name(self) -> str:
        """The name in 8.3 form with the stored case flags applied."""
        return dir_name(self.name, self.reserved_nt)

    def is_file_or_subdir(self) -> bool:
        """True for a file or subdirectory, not a volume label or long name entry."""
        return not self.attributes & DIR_ATT_VOLUME_ID

    def is_long_name(self) -> bool:
        """True for an entry that holds part of a long name."""
        return (self.attributes & DIR_ATT_LONG_NAME_MASK) == DIR_ATT_LONG_NAME