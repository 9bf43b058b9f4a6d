"""Bytecode opcodes and the virtual machine that steps through them."""

from __future__ import annotations

from enum import IntEnum

from excal.stack import Stack

REGISTER_COUNT = 16


class OpCode(IntEnum):
    """Instruction opcodes of the bytecode format."""

    PUSH = 0x00
    POP = 0x01
    DUP = 0x02
    SWAP = 0x03
    OVER = 0x04
    DROP = 0x05
    MOV = 0x06
    SPALLOC = 0x07
    SPFREE = 0x08

    ADD = 0x10
    SUB = 0x11
    MUL = 0x12
    DIV = 0x13
    MOD = 0x14

    FADD = 0x20
    FSUB = 0x21
    FMUL = 0x22
    FDIV = 0x23
    FNEG = 0x24
    FABS = 0x25

    EQ = 0x30
    NEQ = 0x31
    LT = 0x32
    LTE = 0x33
    GT = 0x34
    GTE = 0x35

    JMP = 0x40
    JMP_IF = 0x41
    CALL = 0x42
    RET = 0x43
    SYSCALL = 0x44

    AND = 0x50
    OR = 0x51
    XOR = 0x52
    NOT = 0x53
    SHL = 0x54
    SHR = 0x55

    LOAD = 0x60
    STORE = 0x61


class VM:
    """A stack machine holding bytecode, an instruction pointer, a stack and registers."""

    def __init__(self, bytecode: bytes) -> None:
        self.bytecode = bytes(bytecode)
        self.ip = -1
        self.stack = Stack()
        self.registers = [0] * REGISTER_COUNT

    def advance(self) -> bool:
        """Move to the next byte; return False once past the end of the bytecode."""
        self.ip += 1
        return self.ip < len(self.bytecode)

    def run(self) -> None:
        """Step through the remaining bytecode; instructions leave the machine state as is."""
        while self.advance():
            pass