import pytest

from excal.errors import ErrorCode, ExcalError
from excal.stack import MAX_STACK_SIZE, Stack


def test_push_pop_round_trip():
    stack = Stack()
    stack.push(b"\x01\x02\x03\x04")
    assert stack.sp == 4
    assert stack.pop(4) == b"\x01\x02\x03\x04"
    assert stack.sp == 0


def test_last_in_first_out():
    stack = Stack()
    stack.push(b"ab")
    stack.push(b"cd")
    assert stack.pop(2) == b"cd"
    assert stack.pop(2) == b"ab"


def test_pop_underflow():
    stack = Stack()
    stack.push(b"x")
    with pytest.raises(ExcalError) as info:
        stack.pop(2)
    assert info.value.code is ErrorCode.VM_STACK_UNDERFLOW
    assert stack.sp == 1


def test_push_overflow_leaves_stack_unchanged():
    stack = Stack()
    stack.push(bytes(MAX_STACK_SIZE))
    with pytest.raises(ExcalError) as info:
        stack.push(b"\x00")
    assert info.value.code is ErrorCode.VM_STACK_OVERFLOW
    assert stack.sp == MAX_STACK_SIZE


def test_capacity_matches_limit():
    assert MAX_STACK_SIZE == 65535
    stack = Stack()
    stack.push(bytes(MAX_STACK_SIZE))
    assert len(stack) == MAX_STACK_SIZE


def test_peek_keeps_pointer():
    stack = Stack()
    stack.push(b"hello")
    assert stack.peek(3) == b"llo"
    assert stack.sp == 5


def test_peek_underflow():
    stack = Stack()
    with pytest.raises(ExcalError) as info:
        stack.peek(1)
    assert info.value.code is ErrorCode.VM_STACK_UNDERFLOW


def test_set_sp_moves_pointer():
    stack = Stack()
    stack.push(b"abcd")
    stack.set_sp(2)
    assert stack.sp == 2
    assert stack.pop(2) == b"ab"


@pytest.mark.parametrize("n", [-1, MAX_STACK_SIZE + 1])
def test_set_sp_out_of_range(n):
    stack = Stack()
    with pytest.raises(ValueError):
        stack.set_sp(n)