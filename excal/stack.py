"""Byte-addressed stack used by the virtual machine."""

from __future__ import annotations

from excal.errors import ErrorCode, ExcalError

MAX_STACK_SIZE = 65535


class Stack:
    """A fixed-capacity stack of raw bytes."""

    def __init__(self) -> None:
        self.data = bytearray(MAX_STACK_SIZE)
        self.sp = 0

    def __len__(self) -> int:
        return self.sp

    def push(self, data: bytes) -> None:
        """Push bytes onto the stack."""
        size = len(data)
        if self.sp + size > MAX_STACK_SIZE:
            raise ExcalError(ErrorCode.VM_STACK_OVERFLOW, "Stack exceeded its maximum size.")
        self.data[self.sp : self.sp + size] = data
        self.sp += size

    def pop(self, size: int) -> bytes:
        """Remove and return the top ``size`` bytes."""
        if self.sp < size:
            raise ExcalError(ErrorCode.VM_STACK_UNDERFLOW, "Tried to pop from an empty stack.")
        self.sp -= size
        return bytes(self.data[self.sp : self.sp + size])

    def peek(self, size: int) -> bytes:
        """Return the top ``size`` bytes without removing them."""
        if self.sp < size:
            raise ExcalError(ErrorCode.VM_STACK_UNDERFLOW, "Tried to peek past the stack bottom.")
        return bytes(self.data[self.sp - size : self.sp])

    def set_sp(self, n: int) -> None:
        """Move the stack pointer to ``n``."""
        if not 0 <= n <= MAX_STACK_SIZE:
            raise ValueError(f"stack pointer {n} out of range")
        self.sp = n