"""Errors raised by the generator.

Both kinds are terminal: cli.run reports them once and exits non-zero.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for every user-facing generator failure."""


class ArgumentError(GeneratorError):
    """A required flag or its value is missing, duplicated or unrecognized."""


class WriteError(GeneratorError):
    """The rendered file could not be written to its destination."""
