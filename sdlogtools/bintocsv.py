"""Convert binary analog logger files into CSV text.

A logger file is a sequence of 512-byte blocks.  The first block holds the
recording metadata; each following block holds a count, an overrun count and
either 8-bit or 16-bit ADC samples, all little-endian.
"""

from __future__ import annotations

import math
import os
import struct
import sys
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator, TextIO, Union

BLOCK_SIZE = 512
MAX_PINS = 123
DATA_DIM8 = 508
DATA_DIM16 = 254
MIN_ADC_FREQUENCY = 50_000
MAX_ADC_FREQUENCY = 4_000_000

_META = struct.Struct(f"<5I{MAX_PINS}I")
_BLOCK_HEADER = struct.Struct("<HH")
_U32_MAX = 0xFFFFFFFF
_U16_MAX = 0xFFFF


class BinFormatError(ValueError):
    """Raised when a logger file does not hold valid data."""


def _float32(value: float) -> float:
    """Round a number to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _as_int32(value: int) -> int:
    """Reinterpret an unsigned 32-bit value as signed."""
    return value - (1 << 32) if value >= 1 << 31 else value


@dataclass
class Metadata:
    """Contents of the first block of a logger file."""

    adc_frequency: int
    cpu_frequency: int
    interval_cycles: int
    record_eight_bits: int = 0
    pin_numbers: tuple[int, ...] = ()
    pin_count: int | None = None

    def __post_init__(self) -> None:
        self.pin_numbers = tuple(self.pin_numbers)
        if self.pin_count is None:
            self.pin_count = len(self.pin_numbers)

    @property
    def eight_bits(self) -> bool:
        """True when samples are stored as single bytes."""
        return bool(self.record_eight_bits)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Metadata":
        """Decode a 512-byte metadata block."""
        if len(data) != BLOCK_SIZE:
            raise BinFormatError("read meta data failed")
        values = _META.unpack(data)
        adc, cpu, interval, eight, count = values[:5]
        pins = values[5:5 + min(count, MAX_PINS)]
        return cls(
            adc_frequency=adc,
            cpu_frequency=cpu,
            interval_cycles=interval,
            record_eight_bits=eight,
            pin_numbers=pins,
            pin_count=count,
        )

    def to_bytes(self) -> bytes:
        """Encode the metadata as a 512-byte block."""
        if len(self.pin_numbers) > MAX_PINS:
            raise ValueError(f"at most {MAX_PINS} pin numbers fit in a block")
        pins = list(self.pin_numbers) + [0] * (MAX_PINS - len(self.pin_numbers))
        try:
            return _META.pack(
                self.adc_frequency,
                self.cpu_frequency,
                self.interval_cycles,
                self.record_eight_bits,
                self.pin_count,
                *pins,
            )
        except struct.error as exc:
            raise ValueError(f"metadata field out of range: {exc}") from exc

    def sample_interval(self) -> float:
        """Seconds between samples, computed in single precision."""
        cycles = _float32(self.interval_cycles)
        clock = _float32(self.cpu_frequency)
        if clock == 0:
            return math.nan if cycles == 0 else math.inf
        return _float32(cycles / clock)


@dataclass
class DataBlock:
    """One block of ADC samples."""

    values: tuple[int, ...] = ()
    overrun: int = 0
    _max: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.values = tuple(self.values)

    @property
    def count(self) -> int:
        """Number of samples held by the block."""
        return len(self.values)

    @classmethod
    def from_bytes(cls, data: bytes, eight_bits: bool) -> "DataBlock":
        """Decode a 512-byte data block."""
        if len(data) != BLOCK_SIZE:
            raise BinFormatError("data block must be 512 bytes")
        count, overrun = _BLOCK_HEADER.unpack_from(data)
        limit = DATA_DIM8 if eight_bits else DATA_DIM16
        if count > limit:
            raise BinFormatError("****Invalid data block****")
        offset = _BLOCK_HEADER.size
        if eight_bits:
            values = tuple(data[offset:offset + count])
        else:
            values = struct.unpack_from(f"<{count}H", data, offset)
        return cls(values=values, overrun=overrun)

    def to_bytes(self, eight_bits: bool) -> bytes:
        """Encode the block as 512 bytes."""
        limit = DATA_DIM8 if eight_bits else DATA_DIM16
        if self.count > limit:
            raise ValueError(f"a block holds at most {limit} values")
        if not 0 <= self.overrun <= _U16_MAX:
            raise ValueError("overrun count out of range")
        header = _BLOCK_HEADER.pack(self.count, self.overrun)
        try:
            if eight_bits:
                payload = bytes(self.values) + bytes(DATA_DIM8 - self.count)
            else:
                padded = self.values + (0,) * (DATA_DIM16 - self.count)
                payload = struct.pack(f"<{DATA_DIM16}H", *padded)
        except (ValueError, struct.error) as exc:
            raise ValueError(f"sample value out of range: {exc}") from exc
        return header + payload


def read_blocks(stream: BinaryIO) -> Iterator[bytes]:
    """Yield whole 512-byte blocks from a binary stream; a short tail is dropped."""
    while len(chunk := stream.read(BLOCK_SIZE)) == BLOCK_SIZE:
        yield chunk


def _validate(meta: Metadata) -> None:
    if (
        meta.pin_count == 0
        or meta.pin_count > MAX_PINS
        or meta.adc_frequency < MIN_ADC_FREQUENCY
        or meta.adc_frequency > MAX_ADC_FREQUENCY
    ):
        raise BinFormatError("Invalid meta data")


def _write_csv(meta: Metadata, source: BinaryIO, out: TextIO, report: TextIO) -> int:
    pins = meta.pin_numbers
    print(f"pinCount: {meta.pin_count}", file=report)
    print("Sample pins:" + "".join(f" {_as_int32(p)}" for p in pins), file=report)
    print("ADC clock rate: %g kHz" % (0.001 * meta.adc_frequency), file=report)
    interval = meta.sample_interval()
    rate = math.inf if interval == 0 else 1.0 / interval
    print("Sample rate: %g per sec" % rate, file=report)
    print("Sample interval: %.4f usec" % (1.0e6 * interval), file=report)

    out.write("Interval,%.4f,usec\n" % (1.0e6 * interval))
    out.write("".join(f"pin{_as_int32(p)}," for p in pins[:-1]))
    out.write(f"pin{_as_int32(pins[-1])}\n")

    total = 0
    for raw in read_blocks(source):
        block = DataBlock.from_bytes(raw, meta.eight_bits)
        if block.overrun:
            out.write(f"Overruns,{block.overrun}\n")
        for position, value in enumerate(block.values, 1):
            out.write(f"{value}," if position % meta.pin_count else f"{value}\n")
        total += block.count
    print(f"{total} ADC values read", file=report)
    return total


def convert(
    source: BinaryIO,
    destination: Union[TextIO, str, "os.PathLike[str]"],
    report: TextIO | None = None,
) -> int:
    """Convert a logger file to CSV and return the number of values read.

    ``destination`` is a text stream or a path; a path is opened only once
    the metadata has been found valid.  Progress lines go to ``report``.
    """
    report = sys.stdout if report is None else report
    meta = Metadata.from_bytes(source.read(BLOCK_SIZE))
    _validate(meta)
    if isinstance(destination, (str, os.PathLike)):
        with open(destination, "w") as out:
            return _write_csv(meta, source, out, report)
    return _write_csv(meta, source, destination, report)


def main(argv: list[str] | None = None) -> int:
    """Command entry point: bintocsv binFile csvFile."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("missing arguments:")
        print("bintocsv binFile csvFile")
        return 1
    bin_path, csv_path = args
    try:
        with open(bin_path, "rb") as source:
            convert(source, csv_path, sys.stdout)
    except BinFormatError as exc:
        print(exc)
        return 1
    except OSError as exc:
        print(f"open failed for {exc.filename}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())