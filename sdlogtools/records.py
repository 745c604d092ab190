"""Fixed-size sensor records written by the low-latency loggers."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar, TextIO

ADC_DIM = 4
ACCEL_DIM = 3
LINE_END = "\r\n"


def _unpack(fmt: struct.Struct, data: bytes, name: str) -> tuple[int, ...]:
    try:
        return fmt.unpack(data)
    except struct.error as exc:
        raise ValueError(f"{name} needs {fmt.size} bytes, got {len(data)}") from exc


def _pack(fmt: struct.Struct, values: tuple[int, ...], name: str) -> bytes:
    try:
        return fmt.pack(*values)
    except struct.error as exc:
        raise ValueError(f"{name} field out of range: {exc}") from exc


@dataclass(frozen=True)
class AdcRecord:
    """A timestamp and four analog readings."""

    time: int
    adc: tuple[int, ...] = (0,) * ADC_DIM

    FILE_BASE_NAME: ClassVar[str] = "adc4pin"
    HEADER: ClassVar[str] = "micros" + "".join(f",adc{i}" for i in range(ADC_DIM))
    _FORMAT: ClassVar[struct.Struct] = struct.Struct(f"<I{ADC_DIM}H")

    def __post_init__(self) -> None:
        object.__setattr__(self, "adc", tuple(self.adc))
        if len(self.adc) != ADC_DIM:
            raise ValueError(f"AdcRecord needs {ADC_DIM} readings")

    @property
    def fields(self) -> tuple[int, ...]:
        """Data columns that follow the time column."""
        return self.adc

    @classmethod
    def unpack(cls, data: bytes) -> "AdcRecord":
        """Decode a record from its binary form."""
        time, *adc = _unpack(cls._FORMAT, data, cls.__name__)
        return cls(time, tuple(adc))

    def pack(self) -> bytes:
        """Encode the record in its binary form."""
        return _pack(self._FORMAT, (self.time, *self.adc), type(self).__name__)


@dataclass(frozen=True)
class AccelRecord:
    """A timestamp and three signed acceleration readings."""

    time: int
    accel: tuple[int, ...] = (0,) * ACCEL_DIM

    FILE_BASE_NAME: ClassVar[str] = "ADXL4G"
    HEADER: ClassVar[str] = "micros,ax,ay,az"
    _FORMAT: ClassVar[struct.Struct] = struct.Struct(f"<I{ACCEL_DIM}h")

    def __post_init__(self) -> None:
        object.__setattr__(self, "accel", tuple(self.accel))
        if len(self.accel) != ACCEL_DIM:
            raise ValueError(f"AccelRecord needs {ACCEL_DIM} readings")

    @property
    def fields(self) -> tuple[int, ...]:
        """Data columns that follow the time column."""
        return self.accel

    @classmethod
    def unpack(cls, data: bytes) -> "AccelRecord":
        """Decode a record from its binary form."""
        time, *accel = _unpack(cls._FORMAT, data, cls.__name__)
        return cls(time, tuple(accel))

    def pack(self) -> bytes:
        """Encode the record in its binary form."""
        return _pack(self._FORMAT, (self.time, *self.accel), type(self).__name__)


@dataclass(frozen=True)
class MotionRecord:
    """A timestamp with raw accelerometer and gyroscope readings."""

    time: int
    ax: int = 0
    ay: int = 0
    az: int = 0
    gx: int = 0
    gy: int = 0
    gz: int = 0

    FILE_BASE_NAME: ClassVar[str] = "mpuraw"
    HEADER: ClassVar[str] = "micros,ax,ay,az,gx,gy,gz"
    _FORMAT: ClassVar[struct.Struct] = struct.Struct("<I6h")

    @property
    def fields(self) -> tuple[int, ...]:
        """Data columns that follow the time column."""
        return (self.ax, self.ay, self.az, self.gx, self.gy, self.gz)

    @classmethod
    def unpack(cls, data: bytes) -> "MotionRecord":
        """Decode a record from its binary form."""
        return cls(*_unpack(cls._FORMAT, data, cls.__name__))

    def pack(self) -> bytes:
        """Encode the record in its binary form."""
        return _pack(self._FORMAT, (self.time, *self.fields), type(self).__name__)


class RecordPrinter:
    """Writes records as CSV lines with times relative to the first record."""

    def __init__(self, record_type: type, out: TextIO) -> None:
        self.record_type = record_type
        self.out = out
        self._start = 0

    def print_header(self) -> None:
        """Write the column header and restart relative timing."""
        self._start = 0
        self.out.write(self.record_type.HEADER + LINE_END)

    def print_record(self, record) -> None:
        """Write one record as a CSV line."""
        if not isinstance(record, self.record_type):
            raise TypeError(
                f"expected {self.record_type.__name__}, got {type(record).__name__}"
            )
        if self._start == 0:
            self._start = record.time
        elapsed = (record.time - self._start) & 0xFFFFFFFF
        self.out.write(",".join(str(v) for v in (elapsed, *record.fields)) + LINE_END)