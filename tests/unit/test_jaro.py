"""Tests for Jaro and Jaro-Winkler similarity."""

import pytest

from namehint.similarity.jaro import common_prefix_length, jaro, jaro_winkler

PAIRS = [
    ("hello", "hallo"),
    ("martha", "marhta"),
    ("dixon", "dicksonx"),
    ("frstname", "firstname"),
    ("abc", "xyz"),
    ("a", "b"),
]


class TestJaro:
    """Test suite for the Jaro metric."""

    def test_identical_strings(self) -> None:
        """Test that equal strings score 1.0."""
        assert jaro("hello", "hello") == 1.0

    def test_known_value(self) -> None:
        """Test a hand-computed value."""
        assert jaro("hello", "hallo") == pytest.approx(0.8666666666666667)

    def test_dixon(self) -> None:
        """Test the textbook dixon/dicksonx pair."""
        assert jaro("dixon", "dicksonx") == pytest.approx(0.7666666666666666)

    def test_odd_mismatch_count_rounds_down(self) -> None:
        """Test that three out-of-order matches count as one transposition."""
        # 5 matches, out-of-order count 3 -> t = 1
        assert jaro("acbbacaa", "cbdcba") == pytest.approx(0.7527777777777779)

    def test_both_empty(self) -> None:
        """Test that two empty strings are identical."""
        assert jaro("", "") == 1.0

    @pytest.mark.parametrize("s1, s2", [("hello", ""), ("", "hello"), ("hello", None), (None, "hello")])
    def test_one_empty(self, s1, s2) -> None:
        """Test that exactly one empty input scores 0.0."""
        assert jaro(s1, s2) == 0.0

    def test_none_is_empty(self) -> None:
        """Test that None is treated as an empty string."""
        assert jaro(None, None) == 1.0
        assert jaro(None, "") == 1.0

    def test_no_common_characters(self) -> None:
        """Test that disjoint strings score 0.0."""
        assert jaro("abc", "xyz") == 0.0
        assert jaro("a", "b") == 0.0

    @pytest.mark.parametrize("s1, s2", PAIRS)
    def test_symmetric(self, s1: str, s2: str) -> None:
        """Test that argument order does not matter."""
        assert jaro(s1, s2) == pytest.approx(jaro(s2, s1))

    @pytest.mark.parametrize("s1, s2", PAIRS)
    def test_bounded(self, s1: str, s2: str) -> None:
        """Test that scores stay within [0, 1]."""
        assert 0.0 <= jaro(s1, s2) <= 1.0


class TestJaroWinkler:
    """Test suite for the Jaro-Winkler metric."""

    def test_martha(self) -> None:
        """Test the textbook martha/marhta pair."""
        assert jaro_winkler("martha", "marhta") == pytest.approx(0.9611111111111111)

    def test_hello(self) -> None:
        """Test a one-letter prefix bonus."""
        assert jaro_winkler("hello", "hallo") == pytest.approx(0.88)

    def test_dixon(self) -> None:
        """Test a two-letter prefix bonus."""
        assert jaro_winkler("dixon", "dicksonx") == pytest.approx(0.8133333333333332)

    def test_prefix_bonus_below_boost_threshold(self) -> None:
        """Test that a weak Jaro score still earns the prefix bonus."""
        assert jaro("abcxyz", "abqrst") == pytest.approx(0.5555555555555556)
        assert jaro_winkler("abcxyz", "abqrst") == pytest.approx(0.6444444444444445)

    @pytest.mark.parametrize("s1, s2", PAIRS)
    def test_never_below_jaro(self, s1: str, s2: str) -> None:
        """Test that the prefix bonus only ever raises the score."""
        assert jaro_winkler(s1, s2) >= jaro(s1, s2)

    @pytest.mark.parametrize("s1, s2", PAIRS)
    def test_bounded(self, s1: str, s2: str) -> None:
        """Test that scores stay within [0, 1]."""
        assert 0.0 <= jaro_winkler(s1, s2) <= 1.0

    def test_no_prefix_equals_jaro(self) -> None:
        """Test that strings without a shared prefix get no bonus."""
        assert jaro_winkler("abc", "xbc") == jaro("abc", "xbc")

    def test_identical_and_empty(self) -> None:
        """Test the identity and empty cases."""
        assert jaro_winkler("same", "same") == 1.0
        assert jaro_winkler("", "") == 1.0
        assert jaro_winkler("abc", "") == 0.0
        assert jaro_winkler(None, "abc") == 0.0


class TestCommonPrefix:
    """Test suite for the shared prefix helper."""

    @pytest.mark.parametrize(
        "s1, s2, expected",
        [
            ("martha", "marhta", 3),
            ("abcdef", "abcdeg", 4),
            ("abc", "abc", 3),
            ("abc", "xbc", 0),
            ("", "abc", 0),
        ],
    )
    def test_common_prefix_length(self, s1: str, s2: str, expected: int) -> None:
        """Test the shared prefix length, capped at four."""
        assert common_prefix_length(s1, s2) == expected
