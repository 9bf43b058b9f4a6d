"""Small text and stream helpers shared by the toolchain."""

from __future__ import annotations

import re
from typing import TextIO

from excal.errors import ErrorCode, ExcalError, Severity

_U64_MASK = (1 << 64) - 1

_NUMBER = re.compile(
    r"\s*(?P<sign>[+-]?)(?:(?P<hex>0[xX][0-9a-fA-F]+)|(?P<oct>0[0-7]*)|(?P<dec>[1-9][0-9]*))"
)


def equals_ignore_case(a: str, b: str) -> bool:
    """Compare two strings without regard to letter case."""
    return a.lower() == b.lower()


def read_file(filename: str) -> bytes:
    """Return the whole content of a file."""
    try:
        with open(filename, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise ExcalError(
            ErrorCode.FILE_NOT_FOUND,
            "Could not find the specified file.",
            Severity.FATAL,
            0,
        ) from exc


def read_until(stream: TextIO, delimiters: str, limit: int) -> str:
    """Read characters up to a delimiter, which is consumed but not returned.

    At most ``limit - 1`` characters are kept; the character read once that
    many are held is consumed and dropped.
    """
    chars: list[str] = []
    while c := stream.read(1):
        if c in delimiters or len(chars) >= limit - 1:
            break
        chars.append(c)
    return "".join(chars)


def read_through(stream: TextIO, delimiters: str, limit: int) -> str:
    """Read characters up to and including a delimiter.

    At most ``limit - 2`` characters are kept before the final one read,
    which is always appended.
    """
    chars: list[str] = []
    while c := stream.read(1):
        if c in delimiters or len(chars) >= limit - 2:
            chars.append(c)
            break
        chars.append(c)
    return "".join(chars)


def skip_through(stream: TextIO, delimiters: str) -> None:
    """Discard characters up to and including the next delimiter."""
    while c := stream.read(1):
        if c in delimiters:
            return


def _parse_unsigned(text: str) -> int:
    match = _NUMBER.match(text)
    if match is None:
        return 0
    if match["hex"]:
        value = int(match["hex"][2:], 16)
    elif match["oct"] is not None:
        value = int(match["oct"], 8)
    else:
        value = int(match["dec"], 10)
    if value > _U64_MASK:
        return _U64_MASK
    if match["sign"] == "-":
        value = -value & _U64_MASK
    return value


def encode_hex(value: str, size: int) -> bytes:
    """Encode a numeric literal (decimal, 0x hex or 0 octal) as little-endian bytes."""
    number = _parse_unsigned(value)
    if size < 8:
        number &= (1 << (8 * size)) - 1
    return number.to_bytes(size, "little")