"""Tests for identifier normalization and tokenization."""

import pytest

from namehint.similarity.normalize import normalize, split_identifier


class TestNormalize:
    """Test suite for normalize."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("camelCase", "camelcase"),
            ("snake_case", "snakecase"),
            ("UPPER_CASE", "uppercase"),
            ("mixed Case_with_Spaces", "mixedcasewithspaces"),
            ("tab\tand\nnewline", "tabandnewline"),
        ],
    )
    def test_normalizes_identifier(self, text: str, expected: str) -> None:
        """Test lowercasing and separator removal."""
        assert normalize(text) == expected

    def test_case_and_separator_insensitive(self) -> None:
        """Test that spellings differing only in case and separators agree."""
        assert normalize("Hello_World") == normalize("hello world") == "helloworld"

    def test_keeps_other_punctuation(self) -> None:
        """Test that dots and dashes survive normalization."""
        assert normalize("System.IO-Path") == "system.io-path"

    @pytest.mark.parametrize("text", [None, ""])
    def test_empty_input(self, text) -> None:
        """Test that missing input normalizes to an empty string."""
        assert normalize(text) == ""

    @pytest.mark.parametrize("text", ["Hello_World", "  spaced Out ", "XMLHttpRequest", "__init__", ""])
    def test_idempotent(self, text: str) -> None:
        """Test that normalizing twice changes nothing."""
        assert normalize(normalize(text)) == normalize(text)


class TestSplitIdentifier:
    """Test suite for split_identifier."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("camelCase", ["camel", "case"]),
            ("PascalCase", ["pascal", "case"]),
            ("snake_case", ["snake", "case"]),
            ("SCREAMING_CASE", ["s", "c", "r", "e", "a", "m", "i", "n", "g", "c", "a", "s", "e"]),
            ("XMLHttpRequest", ["x", "m", "l", "http", "request"]),
            ("get123Users456", ["get", "users"]),
            ("mixedCASE_with_123", ["mixed", "c", "a", "s", "e", "with"]),
            ("a", ["a"]),
            ("two words", ["two", "words"]),
        ],
    )
    def test_splits_identifier(self, text: str, expected: list[str]) -> None:
        """Test splitting along casing, underscore, space and digit boundaries."""
        assert split_identifier(text) == expected

    @pytest.mark.parametrize("text", [None, "", " ", "\t", "_", "___", "123"])
    def test_no_letters_yields_no_tokens(self, text) -> None:
        """Test that inputs without letters produce an empty list."""
        assert split_identifier(text) == []

    def test_tokens_never_contain_separators_or_digits(self) -> None:
        """Test that separators and digits never leak into tokens."""
        for token in split_identifier("my_var2 Name__x9Y"):
            assert token
            assert token == token.lower()
            assert not any(c.isdigit() or c.isspace() or c == "_" for c in token)
