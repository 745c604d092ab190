# sdlogtools

Utilities for data written by SD-card data loggers and for the FAT
directory-entry details those files live in.

## What it offers

- **`sdlogtools.bintocsv`**: reads the binary files written by a fast
  analog logger (a 512-byte metadata block followed by 512-byte data
  blocks, little-endian) and turns them into CSV. `Metadata` and
  `DataBlock` decode and encode the blocks (`from_bytes` / `to_bytes`),
  `Metadata.sample_interval()` gives the seconds between samples,
  `read_blocks` yields whole 512-byte blocks from a stream, and `convert`
  writes the CSV and returns the number of values read. Malformed input
  raises `BinFormatError`.
- **`sdlogtools.records`**: fixed-size logger records (`AdcRecord`,
  `AccelRecord`, `MotionRecord`) with `pack` / `unpack`, and a
  `RecordPrinter` that writes them as CSV lines (CR LF endings) with times
  relative to the first record.
- **`sdlogtools.checks`**: `CheckReporter`, a small pass/fail reporter
  that prints aligned `..ok` / `FAIL` lines and a `Test count` /
  `Fail count` summary.
- **`sdlogtools.shortname`**: 8.3 short-name parsing (`parse_short_name`,
  `split_path`), character validation (`legal_83_char`), the `ParsedName`
  result with its `NameFlags`, and `InvalidNameError`.
- **`sdlogtools.dirent`**: the 32-byte FAT directory entry as a
  `DirEntry` with `pack` / `unpack`, attribute tests and
  `display_name()`; `dir_name` formats an eleven-byte name as `BASE.EXT`
  with the lower-case flags applied.
- **`sdlogtools.timestamps`**: `fat_date` / `fat_time` packing with range
  checks (`TimestampError`), `apply_timestamp` to set access, create and
  write stamps chosen by `TimestampFlags`, and `copy_timestamps`.
- **`sdlogtools.fatprint`**: listing-style text for FAT dates and times,
  right-aligned file sizes, numeric fields with terminators, and hex
  dumps.
- **`sdlogtools.textio`**: `read_line` with CR removal and custom
  delimiters, `peek`, `clusters_needed` and `contiguous_block_range`.

## Installation

```
pip install .
```

## Converting a binary log to CSV

```
sdlog-bintocsv ANALOG01.BIN analog01.csv
```

The command prints the pin count, pin list, ADC clock rate, sample rate
and sample interval, then writes a CSV whose first line is the sample
interval in microseconds, followed by a header of pin names and one row
per sample. Overrun counts reported by the logger appear as
`Overruns,<n>` lines. It exits with status 1 and a message when the
arguments are wrong, a file cannot be opened, or the data is invalid.

From Python:

```python
import sys
from sdlogtools.bintocsv import convert

with open("ANALOG01.BIN", "rb") as source, open("analog01.csv", "w") as destination:
    convert(source, destination, sys.stdout)
```

`convert` also accepts a path as the destination; the file is only
created once the metadata block has been found valid.

## Printing logger records

```python
import io
from sdlogtools.records import AdcRecord, RecordPrinter

record_size = len(AdcRecord(0).pack())
out = io.StringIO()
printer = RecordPrinter(AdcRecord, out)
printer.print_header()
with open("adc4pin00.bin", "rb") as f:
    while len(chunk := f.read(record_size)) == record_size:
        printer.print_record(AdcRecord.unpack(chunk))
```

## What it does not do

The package works on bytes, names and single directory entries. It does
not read or write a FAT volume or disk image, does not walk directories
or allocation chains, and has no support for long file names: names are
handled only in 8.3 form.

## Running the tests

```
pip install .[test]
pytest
```