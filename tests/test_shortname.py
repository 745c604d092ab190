import pytest

from sdlogtools.shortname import (
    InvalidNameError,
    NameFlags,
    legal_83_char,
    parse_short_name,
    split_path,
)


def test_simple_name_is_padded_upper_case():
    parsed = parse_short_name("readme.txt")
    assert parsed.sfn == b"README  TXT"
    assert parsed.rest == ""


def test_all_lower_case_sets_both_bits():
    parsed = parse_short_name("readme.txt")
    assert parsed.flags == NameFlags.LC_BASE | NameFlags.LC_EXT


def test_upper_base_lower_extension():
    parsed = parse_short_name("README.txt")
    assert parsed.flags == NameFlags.LC_EXT


def test_mixed_case_clears_flags():
    parsed = parse_short_name("ReadMe.txt")
    assert parsed.flags == NameFlags.NONE
    assert parsed.base == "README"
    assert parsed.extension == "TXT"


def test_upper_case_has_no_flags():
    assert parse_short_name("DATA.CSV").flags == NameFlags.NONE


def test_name_without_extension():
    parsed = parse_short_name("log")
    assert parsed.base == "LOG"
    assert parsed.extension == ""
    assert len(parsed.sfn) == 11


@pytest.mark.parametrize("name", ["abcdefgh.abc", "A", "x_y-z.1", "$%'@~.!"])
def test_sfn_always_eleven_bytes(name):
    parsed = parse_short_name(name)
    assert len(parsed.sfn) == 11
    assert parsed.base == name.split(".")[0].upper()


def test_rest_skips_separators():
    parsed = parse_short_name("dir//file.txt")
    assert parsed.base == "DIR"
    assert parsed.rest == "file.txt"


@pytest.mark.parametrize(
    "name",
    ["", ".txt", "toolongname.txt", "name.text", "a.b.c", "bad*name", "a b", "caf\u00e9"],
)
def test_invalid_names(name):
    with pytest.raises(InvalidNameError):
        parse_short_name(name)


def test_invalid_name_error_is_value_error():
    with pytest.raises(ValueError):
        parse_short_name("/")


@pytest.mark.parametrize("c", list('"|*+,./:;<=>?[\\] ') + ["\x7f", "\x1f"])
def test_illegal_chars(c):
    assert legal_83_char(c) is False


@pytest.mark.parametrize("c", list("AZaz09-_$~!#&{}^`@()'%"))
def test_legal_chars(c):
    assert legal_83_char(c) is True
    assert legal_83_char(ord(c)) is True


def test_split_root():
    assert split_path("/") == (True, [])
    assert split_path("///") == (True, [])


def test_split_absolute_path():
    absolute, parts = split_path("/logs/2018/data.bin")
    assert absolute is True
    assert [p.base for p in parts] == ["LOGS", "2018", "DATA"]
    assert parts[-1].extension == "BIN"


def test_split_relative_path_with_trailing_separator():
    absolute, parts = split_path("logs/")
    assert absolute is False
    assert [p.base for p in parts] == ["LOGS"]


def test_split_empty_relative_path_fails():
    with pytest.raises(InvalidNameError):
        split_path("")


def test_split_bad_component_fails():
    with pytest.raises(InvalidNameError):
        split_path("/ok/not.valid.name/x")