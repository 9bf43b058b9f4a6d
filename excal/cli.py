"""Command-line entry point."""

from __future__ import annotations

import sys
from typing import Sequence

from excal.args import default_options, help_text, parse_args
from excal.assembler import assemble_file
from excal.errors import ExcalError, format_error

VERSION = "0.01 ALPHA"


def help_message() -> str:
    """Return the usage message."""
    return help_text(default_options())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    if not arguments:
        print(help_message(), end="")
        return 0

    try:
        settings = parse_args(arguments, default_options())
        if settings.show_help:
            print(help_message(), end="")
            return 0
        if settings.show_version:
            print(f"Excal: Version {VERSION}")
            return 0
        assemble_file(settings.input_file or arguments[0])
    except ExcalError as error:
        print(format_error(error), end="")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())