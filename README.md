# excal

An assembler that turns Excal assembly (`.xas`) files into bytecode
(`.xbt`), together with the pieces of a small stack-based virtual machine:
a byte stack, the opcode table and a machine that holds bytecode, an
instruction pointer, a stack and sixteen registers.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

Assemble a file; the bytecode is written next to it, with the last three
characters of the name replaced by `xbt`:

```
excal program.xas
excal -i program.xas
```

The input is the file given with `-i`/`--input`, or otherwise the first
argument. Only names ending in `.xas` are accepted; a name without an
extension or with another extension is reported as a fatal error.

Show the usage message or the version (`Excal: Version 0.01 ALPHA`):

```
excal --help
excal --version
```

Running `excal` with no arguments also prints the usage message.

The command recognises these options:

| Option | Effect |
| --- | --- |
| `-h`, `--help` | Prints the usage message and stops. |
| `-v`, `--version` | Prints the version and stops. |
| `-i`, `--input` | Takes the next argument as the file to assemble. |
| `-o`, `--output` | Takes the next argument as an output directory (recorded, not used). |
| `-c`, `--compile` | Accepted and recorded, no effect. |
| `-r`, `--run` | Accepted and recorded, no effect. |
| `-rc`, `--run-compiled` | Accepted and recorded, no effect. |
| `-asm`, `--output-asm` | Accepted and recorded, no effect. |
| `-casm`, `--compile-asm` | Accepted and recorded, no effect. |

Unknown arguments are ignored. `-i` or `-o` without a following value is an
error. Errors are printed as a coloured report and the command exits with
status 1; otherwise it exits with 0.

## Assembly syntax

A `;` starts a comment that runs to the next `;` or end of line. The only
instruction the assembler emits code for is `push`; other words are skipped.

```
; typed immediates, comma separated
push %DWORD:42, -7
push %QWORD:u1000
push %DWORD:f3.14
push %BYTE:0x1F
push %STR:"hello\n"
; a register
push $R3
```

- `push %TYPE:value, value, ...` writes, for each value, the `PUSH` opcode
  (`0x00`), the type byte and the value in little-endian order.
  Types (case-insensitive) and their sizes: `PTR` 4, `BYTE` 1, `WORD` 2,
  `DWORD` 4, `QWORD` 8, `STR` a NUL-terminated string.
- Values: signed decimal (`42`, `-42`), unsigned decimal (`u42`), hex
  (`0x2A`) and floats (`f3.14`, `-f3.14`; 4-byte types store a single,
  8-byte types a double). A float in a `BYTE` or `WORD` is an error.
  Values truncate to the type's size.
- Strings accept the escapes `\n \t \r \a \b \f \v \\ \' \" \?`; any other
  escape is an error.
- `push $REG` writes a single byte, `0x20` plus the register's index in
  `R0`–`R9`, `RPC`, `RSP`, `RBP`, `RFP`. An unknown register is an error.
- `push [ ... ]` is read and ignored.

## Library use

```python
from excal.assembler import Assembler, assemble_file, parse_value, parse_type, ValueType
from excal.errors import ExcalError, format_error
from excal.stack import Stack
from excal.vm import VM, OpCode

assemble_file("program.xas")                  # writes program.xbt, returns its path
Assembler("push %BYTE:5\n").compile()         # b"\x00\x01\x05"
parse_value("42", ValueType.DWORD)            # b"*\x00\x00\x00"
parse_type("qword")                           # ValueType.QWORD

stack = Stack()                               # 65535 bytes of capacity
stack.push(b"\x01\x02")
stack.peek(1)                                 # b"\x02"
stack.pop(2)                                  # b"\x01\x02"

try:
    stack.pop(1)
except ExcalError as error:
    print(format_error(error))                # ERR_VM_STACK_UNDERFLOW report
```

`ExcalError` carries an `ErrorCode`, a `Severity`, a message and a position;
`error_name` gives the display name of a code. The helpers in `excal.text`
(`read_until`, `read_through`, `skip_through`, `encode_hex`,
`equals_ignore_case`, `read_file`) are the stream and literal routines the
assembler uses.

## What it does not do

- There is no compiler for high-level source: `-c`, `-r`, `-asm` and
  `-casm` do nothing beyond being recorded.
- The virtual machine does not execute instructions. `VM.run` only steps
  the instruction pointer through the bytecode, and there is no command to
  run `.xbt` files (`-rc` has no effect).
- Only `push` is assembled; there are no labels, jumps or other mnemonics.