"""Integration test configuration and fixtures."""

from __future__ import annotations

import pytest


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
