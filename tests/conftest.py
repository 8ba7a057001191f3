"""Shared fixtures for the mainfile generator tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture
def output_path(tmp_path: Path) -> Path:
    """Destination for the generated file inside a per-test directory."""
    return tmp_path / "main.swift"


@pytest.fixture
def argv(output_path: Path) -> list[str]:
    """A complete, valid argument vector (program name excluded)."""
    return ["-o", str(output_path), "-m", "MyModule", "-t", "MyMain"]


@pytest.fixture
def umask_022():
    """Run the test under umask 022, restoring the previous one afterwards."""
    old = os.umask(0o022)
    yield
    os.umask(old)
