"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless or function-scoped
- Generic enough for reuse across different test categories
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path

import pytest
from pytest_mock import MockerFixture


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def root_dir(tmp_path: Path) -> Path:
    """Create a clean root directory used to resolve relative paths.

    Returns:
        Absolute path to an empty directory.
    """
    root = tmp_path / "resolve_config_path_test"
    root.mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture
def write_files(root_dir: Path) -> Callable[[Mapping[str, str]], None]:
    """Factory fixture for writing files below ``root_dir``.

    Parent directories are created as needed and existing files are
    overwritten, so a test can change a directory between assertions.

    Example:
        >>> write_files({"a/b/c/jest.config.js": "", "a/b/c/package.json": "{}"})
    """
    def _write(files: Mapping[str, str]) -> None:
        for relative, content in files.items():
            file_path = root_dir / relative
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")

    return _write


# =============================================================================
# Output Handler Fixtures
# =============================================================================

@pytest.fixture
def mock_output_handler(mocker: MockerFixture):
    """Create a mock OutputHandler for dependency injection.

    Returns:
        Mock exposing only ``warning``, so any other call fails loudly.
    """
    return mocker.MagicMock(spec_set=["warning"])


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "pydantic: Tests for Pydantic validation")
