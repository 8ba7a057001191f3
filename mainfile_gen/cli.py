"""Command-line driver: parse -> render -> write.

Usage: swift-mainfile-gen -o <outputFilePath> -m <moduleName> -t <entryTypeName>

Silent on success. On failure prints one "error: ..." line to stderr and
exits 1.
"""

from __future__ import annotations

import sys
from typing import Sequence

from .arguments import parse_arguments
from .codegen import generate
from .errors import GeneratorError

EXIT_FAILURE = 1


def run(argv: Sequence[str]) -> int:
    """Run one generation. argv excludes the program name."""
    try:
        args = parse_arguments(argv)
        generate(args)
    except GeneratorError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    return 0


def main() -> None:
    sys.exit(run(sys.argv[1:]))
