"""
Pytest configuration and shared fixtures for codepoet tests.

This module provides common test fixtures used across the test suite.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the path for testing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from codepoet.imports.conventions import MinimalConvention, ToolConvention
from codepoet.imports.registry import ImportRegistry
from codepoet.imports.resolver import SymbolResolver
from codepoet.utils.config import set_config


CURRENT_PACKAGE = "foo.bar/baz"


@pytest.fixture(autouse=True)
def reset_global_config():
    """Make every test start from the default global configuration."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def minimal_convention():
    return MinimalConvention()


@pytest.fixture
def tool_convention():
    return ToolConvention()


@pytest.fixture
def registry():
    """Create a fresh ImportRegistry scoped to the current test package."""
    return ImportRegistry(CURRENT_PACKAGE)


@pytest.fixture
def resolver():
    """Create a fresh SymbolResolver for a file in package x/y/z."""
    return SymbolResolver.for_package("x/y/z")


@pytest.fixture
def config_dir(tmp_path):
    """Directory for configuration files written by a test."""
    path = tmp_path / "config"
    path.mkdir()
    return path
