"""Tests for the namehint language server command handling."""

import pytest

from namehint.lsp.server import _unpack_arguments, run_suggest_command


class TestUnpackArguments:
    """Test suite for command argument unpacking."""

    def test_positional_object(self) -> None:
        """Test an object passed as the single positional argument."""
        assert _unpack_arguments(({"unknown": "x"},)) == {"unknown": "x"}

    def test_argument_list(self) -> None:
        """Test an object wrapped in the raw arguments list."""
        assert _unpack_arguments(([{"unknown": "x"}],)) == {"unknown": "x"}

    @pytest.mark.parametrize("args", [(), ([],), ("x",), ([1, 2],)])
    def test_no_object(self, args) -> None:
        """Test that anything else yields no arguments."""
        assert _unpack_arguments(args) == {}


class TestRunSuggestCommand:
    """Test suite for run_suggest_command."""

    def test_ranks_candidates(self) -> None:
        """Test ranking with the default threshold."""
        results = run_suggest_command(
            {"unknown": "frstName", "candidates": ["firstName", "lastName", "zip"]}
        )
        assert [r["name"] for r in results] == ["firstName", "lastName"]
        assert results[0]["score"] > results[1]["score"]

    def test_min_score_and_limit(self) -> None:
        """Test the optional threshold and limit."""
        arguments = {"unknown": "frstName", "candidates": ["firstName", "lastName"], "limit": 1}
        assert [r["name"] for r in run_suggest_command(arguments)] == ["firstName"]
        arguments = {"unknown": "frstName", "candidates": ["firstName", "lastName"], "minScore": 1.1}
        assert [r["name"] for r in run_suggest_command(arguments)] == ["firstName"]

    @pytest.mark.parametrize(
        "options",
        [
            {"minScore": None},
            {"minScore": "high"},
            {"minScore": True},
            {"limit": "five"},
            {"limit": None},
            {"limit": 2.5},
        ],
    )
    def test_bad_options_fall_back_to_defaults(self, options) -> None:
        """Test that malformed minScore or limit values use the defaults."""
        arguments = {"unknown": "frstName", "candidates": ["firstName", "lastName", "zip"], **options}
        assert [r["name"] for r in run_suggest_command(arguments)] == ["firstName", "lastName"]

    def test_negative_limit(self) -> None:
        """Test that a negative limit yields no suggestions."""
        arguments = {"unknown": "frstName", "candidates": ["firstName", "lastName"], "limit": -1}
        assert run_suggest_command(arguments) == []

    def test_ignores_non_string_candidates(self) -> None:
        """Test that invalid candidates are skipped."""
        results = run_suggest_command({"unknown": "frstName", "candidates": [None, 3, "firstName"]})
        assert [r["name"] for r in results] == ["firstName"]

    @pytest.mark.parametrize(
        "arguments",
        [{}, {"unknown": "x"}, {"candidates": ["x"]}, {"unknown": 1, "candidates": ["x"]}, {"unknown": "x", "candidates": "x"}],
    )
    def test_invalid_arguments(self, arguments) -> None:
        """Test that malformed arguments yield no suggestions."""
        assert run_suggest_command(arguments) == []
