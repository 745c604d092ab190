"""Line reading, peeking and contiguous allocation arithmetic for files."""

from __future__ import annotations

from typing import BinaryIO, Optional, Union

BLOCK_SHIFT = 9
_U32_MAX = 0xFFFFFFFF

Delimiters = Union[bytes, bytearray, str]


def _delimiters(delim: Optional[Delimiters]) -> bytes:
    if delim is None:
        return b"\n"
    if isinstance(delim, str):
        return delim.encode("latin-1")
    return bytes(delim)


def read_line(stream: BinaryIO, num: int, delim: Optional[Delimiters] = None) -> bytes:
    """Read bytes up to and including a delimiter.

    Reading stops when ``num - 1`` bytes have been stored, when a delimiter
    has been read and stored, or at end of file.  Carriage returns are
    dropped, so CR LF line ends come back as a single LF.  ``delim`` is a
    set of delimiter characters; it defaults to newline.  An empty result
    means end of file.
    """
    stops = _delimiters(delim)
    line = bytearray()
    while len(line) + 1 < num:
        byte = stream.read(1)
        if not byte:
            break
        if byte == b"\r":
            continue
        line += byte
        if byte in stops:
            break
    return bytes(line)


def peek(stream: BinaryIO) -> Optional[int]:
    """Return the next byte of a seekable stream without consuming it.

    Returns None at end of file.
    """
    position = stream.tell()
    byte = stream.read(1)
    if not byte:
        return None
    stream.seek(position)
    return byte[0]


def clusters_needed(size: int, cluster_shift: int) -> int:
    """Number of clusters that hold ``size`` bytes.

    A cluster is ``512 << cluster_shift`` bytes.  A zero length file has no
    clusters and cannot be allocated contiguously.
    """
    if size == 0:
        raise ValueError("a contiguous file must not be empty")
    if not 0 < size <= _U32_MAX:
        raise ValueError("size must be an unsigned 32-bit value")
    if cluster_shift < 0:
        raise ValueError("cluster shift must not be negative")
    return ((size - 1) >> (cluster_shift + BLOCK_SHIFT)) + 1


def contiguous_block_range(
    first_block: int, cluster_count: int, blocks_per_cluster: int
) -> tuple[int, int]:
    """First and last raw block of a contiguous run of clusters."""
    if cluster_count <= 0:
        raise ValueError("file has no clusters")
    if blocks_per_cluster <= 0:
        raise ValueError("blocks per cluster must be positive")
    if first_block < 0:
        raise ValueError("block number must not be negative")
    last_cluster_block = first_block + (cluster_count - 1) * blocks_per_cluster
    return first_block, last_cluster_block + blocks_per_cluster - 1