"""Shared pytest fixtures for the voidrt test suite."""

from __future__ import annotations

import pytest

from voidrt.c_compiler import find_c_compiler
from voidrt.c_runtime import RuntimeLibrary


@pytest.fixture
def needs_cc():
    """Skip test if no C compiler is available."""
    if find_c_compiler() is None:
        pytest.skip("no C compiler available")


@pytest.fixture
def lib():
    """An initialized runtime library with the default symbols."""
    library = RuntimeLibrary()
    library.initialize()
    return library
