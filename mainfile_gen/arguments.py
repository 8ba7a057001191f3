"""Extract the -o / -m / -t options from the command line.

Syntax: each flag is its own token, followed by exactly one value token.
  -o /path/to/main.swift   output file (required)
  -m MyModule              module the @main file is added to (required)
  -t MyMain                name of the @main struct (required)

Flags may come in any order. No "-o=path", "-opath" or combined flags.
A flag given twice is rejected rather than last-value-wins.

argv never includes the program name (sys.argv[1:]).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .errors import ArgumentError

FLAGS: dict[str, str] = {
    "-o": "output file path",
    "-m": "module name",
    "-t": "entry type name",
}


@dataclass(frozen=True)
class InvocationArgs:
    output_path: Path
    module_name: str
    entry_type_name: str


def _collect_values(argv: Sequence[str]) -> dict[str, str]:
    """Walk argv pairwise and map each flag to its value token."""
    values: dict[str, str] = {}
    i = 0
    while i < len(argv):
        flag = argv[i]
        if flag not in FLAGS:
            raise ArgumentError(f"unrecognized argument {flag!r}")
        if flag in values:
            raise ArgumentError(f"duplicate flag {flag!r}")
        if i + 1 >= len(argv) or argv[i + 1] in FLAGS:
            raise ArgumentError(f"missing value for flag {flag!r}")
        value = argv[i + 1]
        if not value:
            raise ArgumentError(f"empty value for flag {flag!r}")
        values[flag] = value
        i += 2
    return values


def parse_arguments(argv: Sequence[str]) -> InvocationArgs:
    """Build InvocationArgs from argv, raising ArgumentError on bad input."""
    values = _collect_values(argv)

    missing = [f"{flag!r} ({label})" for flag, label in FLAGS.items() if flag not in values]
    if missing:
        noun = "flag" if len(missing) == 1 else "flags"
        raise ArgumentError(f"missing required {noun} {', '.join(missing)}")

    return InvocationArgs(
        output_path=Path(values["-o"]),
        module_name=values["-m"],
        entry_type_name=values["-t"],
    )
