"""Tests for winner selection among candidates."""

import itertools
from pathlib import Path

import pytest

from jest_config_path.config.disambiguation import AmbiguityResolver
from jest_config_path.config.enums import CandidateKind
from jest_config_path.exceptions import ConfigNotFoundError


class TestAmbiguityResolver:
    """Test the AmbiguityResolver class."""

    def test_no_candidates(self, mock_output_handler, tmp_path: Path) -> None:
        """Test an empty candidate set raises ConfigNotFoundError."""
        resolver = AmbiguityResolver(mock_output_handler)

        with pytest.raises(ConfigNotFoundError, match="Could not find a config file") as exc_info:
            resolver.resolve([], tmp_path, searched_names=("jest.config.js", "package.json"))

        assert exc_info.value.directory == tmp_path
        assert "jest.config.js, package.json" in str(exc_info.value)
        mock_output_handler.warning.assert_not_called()

    def test_single_candidate(self, mock_output_handler, candidate_factory, tmp_path: Path) -> None:
        """Test a single candidate wins without a warning."""
        candidate = candidate_factory("jest.config.mjs", 1)

        result = AmbiguityResolver(mock_output_handler).resolve([candidate], tmp_path)

        assert result == candidate.path
        mock_output_handler.warning.assert_not_called()

    def test_lowest_priority_wins(self, mock_output_handler, candidate_factory, tmp_path: Path) -> None:
        """Test the highest priority candidate wins with exactly one warning."""
        js = candidate_factory("jest.config.js", 0)
        ts = candidate_factory("jest.config.ts", 4)

        result = AmbiguityResolver(mock_output_handler).resolve([ts, js], tmp_path)

        assert result == js.path
        mock_output_handler.warning.assert_called_once()
        message = mock_output_handler.warning.call_args.args[0]
        assert "Multiple configurations found" in message
        assert str(js.path) in message
        assert str(ts.path) in message

    def test_config_file_beats_manifest(self, mock_output_handler, candidate_factory, tmp_path: Path) -> None:
        """Test any config file outranks a package.json jest key."""
        ts = candidate_factory("jest.config.ts", 4)
        manifest = candidate_factory("package.json", 5, CandidateKind.PACKAGE_MANIFEST_WITH_JEST)

        result = AmbiguityResolver(mock_output_handler).resolve([manifest, ts], tmp_path)

        assert result == ts.path
        mock_output_handler.warning.assert_called_once()
        assert f"`jest` key in {manifest.path}" in mock_output_handler.warning.call_args.args[0]

    def test_winner_independent_of_input_order(self, mock_output_handler, candidate_factory, tmp_path: Path) -> None:
        """Test every permutation of the same candidates picks the same winner."""
        candidates = [
            candidate_factory("jest.config.js", 0),
            candidate_factory("jest.config.cjs", 2),
            candidate_factory("jest.config.json", 3),
            candidate_factory("package.json", 5, CandidateKind.PACKAGE_MANIFEST_WITH_JEST),
        ]
        resolver = AmbiguityResolver(mock_output_handler)

        results = {resolver.resolve(list(order), tmp_path) for order in itertools.permutations(candidates)}
        messages = {call.args[0] for call in mock_output_handler.warning.call_args_list}

        assert results == {tmp_path / "jest.config.js"}
        assert len(messages) == 1

    def test_warns_on_every_call(self, mock_output_handler, candidate_factory, tmp_path: Path) -> None:
        """Test the warning is not suppressed after the first call."""
        candidates = [candidate_factory("jest.config.js", 0), candidate_factory("jest.config.mjs", 1)]
        resolver = AmbiguityResolver(mock_output_handler)

        resolver.resolve(candidates, tmp_path)
        resolver.resolve(candidates, tmp_path)

        assert mock_output_handler.warning.call_count == 2
