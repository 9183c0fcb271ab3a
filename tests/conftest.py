"""Pytest configuration for the codemodel test suite."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for codemodel imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from codemodel.jtypes import ClassRef  # noqa: E402


@pytest.fixture
def list_class() -> ClassRef:
    return ClassRef("List", "java.util")


@pytest.fixture
def map_class() -> ClassRef:
    return ClassRef("Map", "java.util")
