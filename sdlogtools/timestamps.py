"""Packed FAT dates and times, and the timestamps of directory entries."""

from __future__ import annotations

import enum

from .dirent import DirEntry

MIN_YEAR = 1980
MAX_YEAR = 2107


class TimestampError(ValueError):
    """Raised when a date, a time or the entry to stamp is not valid."""


class TimestampFlags(enum.IntFlag):
    """Which timestamps of an entry to set."""

    NONE = 0
    ACCESS = 0x01
    CREATE = 0x02
    WRITE = 0x04
    ALL = ACCESS | CREATE | WRITE


def _check(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise TimestampError(f"{name} must be between {low} and {high}, got {value}")


def fat_date(year: int, month: int, day: int) -> int:
    """Pack a date into the 16-bit directory date field."""
    _check("year", year, MIN_YEAR, MAX_YEAR)
    _check("month", month, 0, 15)
    _check("day", day, 0, 31)
    return ((year - MIN_YEAR) << 9) | (month << 5) | day


def fat_time(hour: int, minute: int, second: int) -> int:
    """Pack a time into the 16-bit directory time field; seconds lose their low bit."""
    _check("hour", hour, 0, 31)
    _check("minute", minute, 0, 63)
    _check("second", second, 0, 63)
    return (hour << 11) | (minute << 5) | (second >> 1)


def _require_file(entry: DirEntry, role: str) -> None:
    if not entry.is_file_or_subdir() or entry.is_directory:
        raise TimestampError(f"{role} entry is not a normal file")


def apply_timestamp(
    entry: DirEntry,
    flags: int,
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
) -> DirEntry:
    """Set the timestamps chosen by ``flags`` on a file entry and return it.

    There is no check of the number of days in a month.
    """
    _require_file(entry, "target")
    _check("year", year, MIN_YEAR, MAX_YEAR)
    _check("month", month, 1, 12)
    _check("day", day, 1, 31)
    _check("hour", hour, 0, 23)
    _check("minute", minute, 0, 59)
    _check("second", second, 0, 59)
    flags = TimestampFlags(flags)
    date = fat_date(year, month, day)
    time = fat_time(hour, minute, second)
    if flags & TimestampFlags.ACCESS:
        entry.last_access_date = date
    if flags & TimestampFlags.CREATE:
        entry.creation_date = date
        entry.creation_time = time
        # The field counts hundredths of a second, which restores the odd second.
        entry.creation_time_tenths = 100 if second & 1 else 0
    if flags & TimestampFlags.WRITE:
        entry.last_write_date = date
        entry.last_write_time = time
    return entry


def copy_timestamps(target: DirEntry, source: DirEntry) -> DirEntry:
    """Copy all timestamps of ``source`` onto ``target`` and return ``target``."""
    _require_file(target, "target")
    _require_file(source, "source")
    target.last_access_date = source.last_access_date
    target.creation_date = source.creation_date
    target.creation_time = source.creation_time
    target.creation_time_tenths = source.creation_time_tenths
    target.last_write_date = source.last_write_date
    target.last_write_time = source.last_write_time
    return target