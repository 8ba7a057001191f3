"""Build the Jinja2 template context for main.swift.j2."""

from __future__ import annotations

from typing import Any


def build_context(module_name: str, entry_type_name: str) -> dict[str, Any]:
    """Return the substitution values for the entry-point template.

    Names are passed through verbatim; they are not checked to be valid
    Swift identifiers.
    """
    return {
        "module_name": module_name,
        "entry_type_name": entry_type_name,
    }
