"""Error codes, severities and the exception raised across the toolchain."""

from __future__ import annotations

from enum import Enum, IntEnum


class ErrorCode(IntEnum):
    """Numeric error codes, grouped by the stage that reports them."""

    NO_ERR = 0
    FILE_NOT_FOUND = 1
    FILE_UNKNOWN_TYPE = 2

    COMP_SYNTAX = 1000
    COMP_UNDECLARED_IDENTIFIER = 1001
    COMP_TYPE_MISMATCH = 1002
    COMP_INVALID_LITERAL = 1003
    COMP_INVALID_TOKEN = 1004
    COMP_UNSUPPORTED_FEATURE = 1005
    COMP_OUTPUT_WRITE_FAIL = 1006
    COMP_INTERNAL = 1007
    COMP_MISSING_ARG = 1008

    ASM_INVALID_OPCODE = 2000
    ASM_SYNTAX = 2001
    ASM_UNDEFINED_LABEL = 2002
    ASM_DUPLICATE_LABEL = 2003
    ASM_INVALID_OPERAND = 2004
    ASM_WRITE_FAIL = 2005
    ASM_OVERFLOW = 2006
    ASM_INTERNAL = 2007
    ASM_BUFFER_OVERFLOW = 2008

    VM_STACK_UNDERFLOW = 3000
    VM_STACK_OVERFLOW = 3001
    VM_INVALID_INSTRUCTION = 3002
    VM_INVALID_MEMORY_ACCESS = 3003
    VM_DIVIDE_BY_ZERO = 3004
    VM_NULL_POINTER = 3005
    VM_BAD_SYSCALL = 3006
    VM_HALT_UNEXPECTED = 3007
    VM_REGISTER_UNDEFINED = 3008
    VM_INTERNAL = 3009


# Codes without a display name fall back to UNKNOWN_ERROR.
_UNNAMED = frozenset({ErrorCode.COMP_MISSING_ARG, ErrorCode.ASM_BUFFER_OVERFLOW})

_NAMES = {
    code: (code.name if code is ErrorCode.NO_ERR else f"ERR_{code.name}")
    for code in ErrorCode
    if code not in _UNNAMED
}


class Severity(Enum):
    """How serious a reported error is."""

    WARNING = 0
    INFO = 1
    FATAL = 2

    @property
    def label(self) -> str:
        """Coloured label shown in error reports."""
        return _SEVERITY_LABELS[self]


_SEVERITY_LABELS = {
    Severity.WARNING: "\033[1;33mWARNING",
    Severity.FATAL: "\033[1;31mFATAL",
    Severity.INFO: "\033[1;36mINFO",
}


class ExcalError(Exception):
    """An error reported by the assembler, compiler or virtual machine."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        severity: Severity = Severity.FATAL,
        pos: int = 0,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.severity = severity
        self.pos = pos


def error_name(code: int) -> str:
    """Return the display name of an error code."""
    try:
        return _NAMES.get(ErrorCode(code), "UNKNOWN_ERROR")
    except ValueError:
        return "UNKNOWN_ERROR"


def format_error(error: ExcalError) -> str:
    """Render an error as the coloured multi-line report shown to users."""
    return (
        f"\033[1;37mExcal: {error.severity.label}\n"
        f"\033[1;33m{error_name(error.code)} [{error.pos}]\033[0m\n"
        f"{error.message}\n\033[0m"
    )