import io

import pytest

from sdlogtools.textio import (
    clusters_needed,
    contiguous_block_range,
    peek,
    read_line,
)


def test_read_line_stops_after_newline():
    stream = io.BytesIO(b"first\nsecond\n")
    assert read_line(stream, 64) == b"first\n"
    assert read_line(stream, 64) == b"second\n"
    assert read_line(stream, 64) == b""


def test_read_line_drops_carriage_returns():
    stream = io.BytesIO(b"abc\r\ndef")
    assert read_line(stream, 64) == b"abc\n"
    assert read_line(stream, 64) == b"def"


def test_read_line_respects_size_limit():
    stream = io.BytesIO(b"abcdef\n")
    assert read_line(stream, 3) == b"ab"
    assert read_line(stream, 3) == b"cd"


def test_read_line_limit_one_reads_nothing():
    stream = io.BytesIO(b"abc")
    assert read_line(stream, 1) == b""
    assert stream.tell() == 0


def test_read_line_custom_delimiters():
    stream = io.BytesIO(b"1,2;3\n")
    assert read_line(stream, 64, ",;") == b"1,"
    assert read_line(stream, 64, b",;") == b"2;"
    assert read_line(stream, 64, ",;") == b"3\n"


def test_read_line_newline_not_delimiter_when_custom():
    stream = io.BytesIO(b"a\nb,c")
    assert read_line(stream, 64, ",") == b"a\nb,"


def test_peek_does_not_consume():
    stream = io.BytesIO(b"XY")
    assert peek(stream) == ord("X")
    assert stream.tell() == 0
    assert stream.read(1) == b"X"
    assert peek(stream) == ord("Y")


def test_peek_at_end_of_file():
    stream = io.BytesIO(b"Z")
    stream.read()
    assert peek(stream) is None
    assert stream.tell() == 1


def test_clusters_needed_single_block_cluster():
    assert clusters_needed(1, 0) == 1
    assert clusters_needed(512, 0) == 1
    assert clusters_needed(513, 0) == 2


@pytest.mark.parametrize("size", [1, 511, 512, 513, 4096, 100_000, 0xFFFFFFFF])
@pytest.mark.parametrize("shift", [0, 1, 3, 6])
def test_clusters_needed_covers_size_exactly(size, shift):
    cluster_bytes = 512 << shift
    count = clusters_needed(size, shift)
    assert count * cluster_bytes >= size
    assert (count - 1) * cluster_bytes < size


def test_clusters_needed_rejects_zero_size():
    with pytest.raises(ValueError):
        clusters_needed(0, 3)


def test_clusters_needed_rejects_oversize():
    with pytest.raises(ValueError):
        clusters_needed(1 << 32, 0)


def test_contiguous_block_range_single_cluster():
    assert contiguous_block_range(100, 1, 1) == (100, 100)


@pytest.mark.parametrize("count,per_cluster", [(1, 8), (5, 1), (3, 64)])
def test_contiguous_block_range_spans_all_blocks(count, per_cluster):
    begin, end = contiguous_block_range(2048, count, per_cluster)
    assert begin == 2048
    assert end - begin + 1 == count * per_cluster


def test_contiguous_block_range_no_clusters():
    with pytest.raises(ValueError):
        contiguous_block_range(0, 0, 8)


def test_contiguous_block_range_bad_cluster_size():
    with pytest.raises(ValueError):
        contiguous_block_range(0, 2, 0)