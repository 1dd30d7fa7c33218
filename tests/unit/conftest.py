"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on lightweight mocks and fast execution.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from jest_config_path.config.enums import CandidateKind
from jest_config_path.config.models import Candidate


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Sample Data Factories
# =============================================================================

@pytest.fixture
def candidate_factory(tmp_path: Path):
    """Factory fixture for creating Candidate instances below ``tmp_path``.

    Returns:
        Callable that creates a Candidate with sensible defaults.

    Example:
        >>> candidate = candidate_factory("jest.config.ts", priority=4)
    """
    def _create(
        name: str = "jest.config.js",
        priority: int = 0,
        kind: CandidateKind = CandidateKind.JEST_CONFIG_FILE,
    ) -> Candidate:
        return Candidate(path=tmp_path / name, kind=kind, priority=priority)

    return _create
