"""Assembler turning textual assembly into bytecode."""

from __future__ import annotations

import io
import math
import re
import struct
from enum import IntEnum

from excal.errors import ErrorCode, ExcalError, Severity
from excal.text import encode_hex, equals_ignore_case, read_file, read_until, skip_through
from excal.vm import OpCode

MAX_BUFFER_SIZE = 255

EXT_ASM = "xas"
EXT_BIN = "xbt"

REGISTERS = ("R0", "R1", "R2", "R3", "R4", "R5", "R6", "R7", "R8", "R9", "RPC", "RSP", "RBP", "RFP")
REGISTER_BASE = 0x20

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
    "?": "?",
}

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(
    r"\s*[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_U64_MAX = (1 << 64) - 1


class ValueType(IntEnum):
    """Operand types and their encoding byte."""

    PTR = 0x00
    BYTE = 0x01
    WORD = 0x02
    DWORD = 0x03
    QWORD = 0x04
    STR = 0x05


_SIZES = {
    ValueType.PTR: 4,
    ValueType.BYTE: 1,
    ValueType.WORD: 2,
    ValueType.DWORD: 4,
    ValueType.QWORD: 8,
    ValueType.STR: None,
}


def parse_type(name: str) -> ValueType:
    """Return the operand type named by ``name``, ignoring case."""
    for value_type in ValueType:
        if equals_ignore_case(name, value_type.name):
            return value_type
    raise ExcalError(ErrorCode.ASM_INVALID_OPERAND, f"Unknown type provided {name}")


def type_size(value_type: int) -> int | None:
    """Return the encoded size in bytes of a type; None for variable-length strings."""
    try:
        return _SIZES[ValueType(value_type)]
    except ValueError:
        return 4


def _parse_int(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _parse_float(text: str) -> float:
    match = _FLOAT.match(text)
    return float(match.group(0)) if match else 0.0


def _pack_float(value: float, size: int) -> bytes:
    if size == 4:
        try:
            return struct.pack("<f", value)
        except OverflowError:
            return struct.pack("<f", math.copysign(math.inf, value))
    return struct.pack("<d", value)


def _pack_int(value: int, size: int) -> bytes:
    return (value & ((1 << (8 * size)) - 1)).to_bytes(size, "little")


def parse_value(token: str, value_type: int) -> bytes:
    """Encode an operand literal as little-endian bytes of the type's size.

    Literals are ``0x`` hex, ``f``/``-f`` floats, ``u`` unsigned and plain
    signed decimal integers; anything else encodes as zero.
    """
    size = type_size(value_type)
    if size is None:
        raise ExcalError(ErrorCode.ASM_INVALID_OPERAND, "STR values have no fixed size.")

    if token.startswith("0x"):
        return encode_hex(token, size)
    if token.startswith("-f") or token.startswith("f"):
        if size < 4:
            raise ExcalError(
                ErrorCode.ASM_INVALID_OPCODE, "Given TYPE is too small for a FLOAT value."
            )
        if token.startswith("-f"):
            return _pack_float(-_parse_float(token[2:]), size)
        return _pack_float(_parse_float(token[1:]), size)
    if token.startswith("u"):
        value = _parse_int(token[1:])
        if value > _U64_MAX:
            value = _U64_MAX
        return _pack_int(value, size)
    if (token.startswith("-") and token[1:2].isdigit()) or token[:1].isdigit():
        return _pack_int(_parse_int(token), size)
    return bytes(size)


class Assembler:
    """Assembles source text into bytecode."""

    def __init__(self, source: str) -> None:
        self._src = io.StringIO(source)
        self._out = bytearray()

    def compile(self) -> bytes:
        """Assemble the whole source and return the bytecode."""
        while c := self._src.read(1):
            if c == ";":
                skip_through(self._src, ";\n")
            elif c.isspace():
                continue
            else:
                token = c + read_until(self._src, " \n", MAX_BUFFER_SIZE)
                self._instruction(token)
        return bytes(self._out)

    def _instruction(self, mnemonic: str) -> None:
        if equals_ignore_case(mnemonic, "push"):
            self._push()

    def _push(self) -> None:
        c = self._src.read(1)
        if c == "%":
            value_type = parse_type(read_until(self._src, ":", MAX_BUFFER_SIZE))
            while True:
                if value_type is ValueType.STR:
                    self._push_string()
                else:
                    token = self._read_operand()
                    self._out.append(OpCode.PUSH)
                    self._out.append(value_type)
                    self._out += parse_value(token, value_type)
                if self._src.read(1) != ",":
                    break
        elif c == "$":
            name = read_until(self._src, " \n", MAX_BUFFER_SIZE)
            for index, register in enumerate(REGISTERS):
                if equals_ignore_case(name, register):
                    self._out.append(REGISTER_BASE + index)
                    return
            raise ExcalError(ErrorCode.ASM_INVALID_OPERAND, f"Unknown register {name}")
        elif c == "[":
            read_until(self._src, "]", MAX_BUFFER_SIZE)

    def _skip_spaces(self) -> None:
        while True:
            pos = self._src.tell()
            if self._src.read(1) != " ":
                self._src.seek(pos)
                return

    def _read_operand(self) -> str:
        """Read an operand, leaving its delimiter in the stream."""
        self._skip_spaces()
        chars: list[str] = []
        while len(chars) < MAX_BUFFER_SIZE - 1:
            pos = self._src.tell()
            c = self._src.read(1)
            if not c:
                break
            if c in ", \n":
                self._src.seek(pos)
                break
            chars.append(c)
        return "".join(chars)

    def _push_string(self) -> None:
        self._skip_spaces()
        if self._src.read(1) != '"':
            raise ExcalError(ErrorCode.ASM_SYNTAX, "Expected a string literal.")
        self._out.append(OpCode.PUSH)
        self._out.append(ValueType.STR)
        self._write_string()

    def _write_string(self) -> None:
        chars: list[str] = []
        while (c := self._src.read(1)) != '"':
            if not c:
                raise ExcalError(ErrorCode.ASM_SYNTAX, "Unterminated string literal.")
            if c == "\\":
                escape = self._src.read(1)
                if escape not in _ESCAPES:
                    raise ExcalError(ErrorCode.ASM_WRITE_FAIL, f"Invalid escape code '\\{escape}'")
                chars.append(_ESCAPES[escape])
            else:
                chars.append(c)
        self._out += "".join(chars).encode("latin-1") + b"\0"


def output_path(filename: str) -> str:
    """Return the bytecode file name for an assembly file name."""
    return filename[:-3] + EXT_BIN


def assemble_file(filename: str) -> str:
    """Assemble an ``.xas`` file into an ``.xbt`` file next to it; return the output path."""
    dot = filename.rfind(".")
    if dot < 0:
        raise ExcalError(
            ErrorCode.FILE_UNKNOWN_TYPE, "File has no extension provided.", Severity.FATAL, 0
        )
    extension = filename[dot + 1 :]
    if extension != EXT_ASM:
        raise ExcalError(
            ErrorCode.FILE_UNKNOWN_TYPE,
            f"Unsupported file type '.{extension}'",
            Severity.FATAL,
            1,
        )
    source = read_file(filename).decode("latin-1")
    bytecode = Assembler(source).compile()
    target = output_path(filename)
    try:
        with open(target, "wb") as handle:
            handle.write(bytecode)
    except OSError as exc:
        raise ExcalError(
            ErrorCode.ASM_WRITE_FAIL,
            "Could not create a file of specified name",
            Severity.FATAL,
            1,
        ) from exc
    return target