"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the yamlprops test suite.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from yamlprops import ByteArrayResource, YamlPropertySourceLoader

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (may use filesystem, packages)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding YAML fixture files."""
    return FIXTURES_DIR


@pytest.fixture
def loader() -> YamlPropertySourceLoader:
    """Provide a fresh YAML property source loader."""
    return YamlPropertySourceLoader()


@pytest.fixture
def yaml_resource() -> Callable[[str], ByteArrayResource]:
    """
    Provide a factory building in-memory resources from YAML text.

    Returns:
        Callable taking YAML text and returning a ByteArrayResource
    """

    def make(text: str) -> ByteArrayResource:
        return ByteArrayResource(text.encode("utf-8"))

    return make


# =============================================================================
# Test Collection Hooks
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """
    Add the 'unit' marker to tests without other markers.

    Args:
        config: Pytest config object
        items: List of collected test items
    """
    for item in items:
        if not any(mark.name in ["integration"] for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
