import io

import pytest

from excal.errors import ErrorCode, ExcalError
from excal.text import (
    encode_hex,
    equals_ignore_case,
    read_file,
    read_through,
    read_until,
    skip_through,
)


@pytest.mark.parametrize(
    "a, b, expected",
    [("push", "PUSH", True), ("DWord", "dword", True), ("push", "pushx", False), ("", "", True)],
)
def test_equals_ignore_case(a, b, expected):
    assert equals_ignore_case(a, b) is expected


def test_read_file_round_trip(tmp_path):
    path = tmp_path / "prog.xas"
    path.write_bytes(b"push %DWORD:5\n")
    assert read_file(str(path)) == b"push %DWORD:5\n"


def test_read_file_missing(tmp_path):
    with pytest.raises(ExcalError) as info:
        read_file(str(tmp_path / "absent.xas"))
    assert info.value.code is ErrorCode.FILE_NOT_FOUND


def test_read_until_stops_at_delimiter():
    stream = io.StringIO("push %DWORD:5")
    assert read_until(stream, " \n", 255) == "push"
    assert stream.read() == "%DWORD:5"


def test_read_until_reaches_end():
    stream = io.StringIO("word")
    assert read_until(stream, " ", 255) == "word"
    assert stream.read() == ""


def test_read_until_limit_drops_overflow_char():
    stream = io.StringIO("abcdef")
    assert read_until(stream, " ", 4) == "abc"
    assert stream.read() == "ef"


def test_read_through_keeps_delimiter():
    stream = io.StringIO("12, 3")
    assert read_through(stream, ", \n", 255) == "12,"
    assert stream.read() == " 3"


def test_read_through_at_end_of_stream():
    stream = io.StringIO("abc")
    assert read_through(stream, ",", 255) == "abc"


def test_read_through_limit():
    stream = io.StringIO("abcdef")
    result = read_through(stream, ",", 4)
    assert result == "abc"
    assert stream.read() == "def"


def test_skip_through_consumes_line():
    stream = io.StringIO("a comment\nnext")
    skip_through(stream, ";\n")
    assert stream.read() == "next"


def test_skip_through_without_delimiter_empties_stream():
    stream = io.StringIO("no end")
    skip_through(stream, "\n")
    assert stream.read() == ""


def test_encode_hex_little_endian():
    assert encode_hex("0x1A2B", 2) == b"\x2b\x1a"


@pytest.mark.parametrize("size", [1, 2, 4, 8, 12])
def test_encode_hex_length(size):
    assert len(encode_hex("0x1", size)) == size


def test_encode_hex_round_trip():
    assert int.from_bytes(encode_hex("0xdeadbeef", 4), "little") == 0xDEADBEEF
    assert int.from_bytes(encode_hex("1234", 8), "little") == 1234


def test_encode_hex_octal_prefix():
    assert int.from_bytes(encode_hex("010", 1), "little") == 0o10


def test_encode_hex_invalid_is_zero():
    assert encode_hex("zz", 2) == b"\x00\x00"


def test_encode_hex_negative_wraps():
    assert encode_hex("-1", 4) == b"\xff\xff\xff\xff"