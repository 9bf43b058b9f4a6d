"""Command-line option table and parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from excal.errors import ErrorCode, ExcalError, Severity


@dataclass
class CompileArgs:
    """Settings collected from the command line."""

    output_asm: bool = False
    compile_outasm: bool = False
    run_source: bool = False
    run_compiled: bool = False
    compile: bool = False
    show_help: bool = False
    show_version: bool = False
    output_dir: str | None = None
    input_file: str | None = None


class ArgKind(Enum):
    """How an option takes its value."""

    GET_NEXT_STRING = 0
    SET_BOOL = 1


@dataclass(frozen=True)
class Option:
    """One command-line option: its spellings, help text and the setting it changes."""

    names: tuple[str, ...]
    help: str
    field: str
    kind: ArgKind

    def matches(self, arg: str) -> bool:
        """Tell whether ``arg`` is one of this option's spellings."""
        return arg in self.names

    def apply(self, args: CompileArgs, value: str | None = None) -> None:
        """Record this option in ``args``."""
        if self.kind is ArgKind.SET_BOOL:
            setattr(args, self.field, True)
        elif value is not None:
            setattr(args, self.field, value)


def default_options() -> list[Option]:
    """Return the options the command understands, in help order."""
    return [
        Option(("-h", "--help"), "Shows this message.", "show_help", ArgKind.SET_BOOL),
        Option(("-c", "--compile"), "Compiles source code.", "compile", ArgKind.SET_BOOL),
        Option(
            ("-r", "--run"),
            "Runs source code right after compiling.",
            "run_source",
            ArgKind.SET_BOOL,
        ),
        Option(
            ("-rc", "--run-compiled"),
            "Runs precompiled bytecode.",
            "run_compiled",
            ArgKind.SET_BOOL,
        ),
        Option(
            ("-o", "--output"),
            "Sets the output directory for compiled files.",
            "output_dir",
            ArgKind.GET_NEXT_STRING,
        ),
        Option(
            ("-i", "--input"),
            "Sets the input file that will be compiled.",
            "input_file",
            ArgKind.GET_NEXT_STRING,
        ),
        Option(
            ("-asm", "--output-asm"),
            "Outputs intermediate assembly code.",
            "output_asm",
            ArgKind.SET_BOOL,
        ),
        Option(
            ("-casm", "--compile-asm"),
            "Compiles previously outputted assembly code.",
            "compile_outasm",
            ArgKind.SET_BOOL,
        ),
        Option(
            ("-v", "--version"),
            "Prints the version of Excal.",
            "show_version",
            ArgKind.SET_BOOL,
        ),
    ]


def parse_args(argv: Sequence[str], options: Iterable[Option] | None = None) -> CompileArgs:
    """Parse arguments (without the program name); unknown arguments are ignored."""
    table = list(default_options() if options is None else options)
    result = CompileArgs()
    args = iter(enumerate(argv))
    for _, arg in args:
        for option in table:
            if not option.matches(arg):
                continue
            if option.kind is ArgKind.SET_BOOL:
                option.apply(result)
                continue
            following = next(args, None)
            if following is None:
                raise ExcalError(
                    ErrorCode.COMP_MISSING_ARG,
                    "Missing argument.",
                    Severity.FATAL,
                    len(argv) + 1,
                )
            option.apply(result, following[1])
            break
    return result


def help_text(options: Iterable[Option] | None = None) -> str:
    """Render the usage message listing every option."""
    table = default_options() if options is None else options
    lines = ["Excal: Usage", ""]
    lines.extend(f"{' '.join(option.names)} : {option.help}" for option in table)
    return "\n".join(lines) + "\n"