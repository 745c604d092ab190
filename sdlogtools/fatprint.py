"""Text formatting of directory fields, sizes, number fields and hex dumps."""

from __future__ import annotations

import math
from typing import Optional

_U32_MAX = 0xFFFFFFFF
_I32_MIN = -(1 << 31)
_DUMP_LIMIT = 0xFFF0


def _two_digits(value: int) -> str:
    return f"{value:02d}" if value < 100 else "??"


def _terminator(term: Optional[str]) -> str:
    if not term:
        return ""
    return "\r\n" if term == "\n" else term


def format_fat_date(value: int) -> str:
    """Format a packed directory date as yyyy-mm-dd."""
    if not 0 <= value <= 0xFFFF:
        raise ValueError("date field must be a 16-bit value")
    year = 1980 + (value >> 9)
    month = (value >> 5) & 0x0F
    day = value & 0x1F
    return f"{year}-{_two_digits(month)}-{_two_digits(day)}"


def format_fat_time(value: int) -> str:
    """Format a packed directory time as hh:mm:ss."""
    if not 0 <= value <= 0xFFFF:
        raise ValueError("time field must be a 16-bit value")
    hour = value >> 11
    minute = (value >> 5) & 0x3F
    second = 2 * (value & 0x1F)
    return f"{_two_digits(hour)}:{_two_digits(minute)}:{_two_digits(second)}"


def format_file_size(size: int) -> str:
    """Format a file size right aligned in ten columns."""
    if not 0 <= size <= _U32_MAX:
        raise ValueError("file size must be an unsigned 32-bit value")
    return f"{size:>10}"


def format_field(value: int, term: Optional[str] = None) -> str:
    """Format an integer followed by a field terminator.

    A newline terminator is written as CR LF; an empty terminator adds nothing.
    """
    if not _I32_MIN <= value <= _U32_MAX:
        raise ValueError("field value out of 32-bit range")
    sign = "-" if value < 0 else ""
    return f"{sign}{abs(value)}{_terminator(term)}"


def format_float_field(value: float, term: Optional[str] = None, prec: int = 2) -> str:
    """Format a number with ``prec`` decimals followed by a field terminator."""
    if prec < 0:
        raise ValueError("precision must not be negative")
    if math.isnan(value):
        text = "nan"
    elif math.isinf(value):
        text = "-inf" if value < 0 else "inf"
    else:
        text = f"{value:.{prec}f}"
    return text + _terminator(term)


def hex_dump(data: bytes, pos: int = 0, n: int = 0) -> str:
    """Dump ``n`` bytes of ``data`` starting at ``pos`` as hex with text columns."""
    if n < 0:
        raise ValueError("count must not be negative")
    if not 0 <= pos <= len(data):
        raise ValueError("position beyond end of data")
    n = min(n, _DUMP_LIMIT)
    source = iter(data[pos:])
    text = [" "] * 16
    parts: list[str] = []
    for i in range(n + 1):
        if i & 15 == 0:
            if i:
                parts.append(" " + "".join(text))
                if i == n:
                    break
            parts.append("\r\n")
            if i >= n:
                break
            parts.append(f"{i & 0xFFFF:04X} ")
        byte = next(source, None)
        if byte is None:
            break
        parts.append(f" {byte:02X}")
        text[i & 15] = chr(byte) if 0x20 <= byte < 0x7F else "."
    parts.append("\r\n")
    return "".join(parts)