"""Tests for missing-value detection and numeric parsing."""

import pytest

from statsctl.utils.validators import MISSING_TOKENS, is_boolean_token, is_missing, parse_number


class TestIsMissing:
    """Tests for is_missing."""

    @pytest.mark.parametrize(
        "value",
        ["", "NA", "na", "N/A", "n/a", "null", "NULL", ".", "NaN", "nan", "-", "None", "none"],
    )
    def test_missing_tokens(self, value: str) -> None:
        """Test every token of the missing vocabulary."""
        assert is_missing(value)

    @pytest.mark.parametrize("value", ["  ", "  NA  ", "\tNaN\t", " - "])
    def test_missing_with_whitespace(self, value: str) -> None:
        """Test that surrounding whitespace is ignored."""
        assert is_missing(value)

    @pytest.mark.parametrize("value", ["0", "hello", "123", "3.14", "true", "N/A value", "NONE"])
    def test_not_missing(self, value: str) -> None:
        """Test values outside the vocabulary."""
        assert not is_missing(value)

    def test_vocabulary_is_immutable(self) -> None:
        """Test the vocabulary is a fixed frozenset of 13 tokens."""
        assert isinstance(MISSING_TOKENS, frozenset)
        assert len(MISSING_TOKENS) == 13


class TestParseNumber:
    """Tests for parse_number."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("42", 42.0), ("-3.5", -3.5), (" 7 ", 7.0), ("1e3", 1000.0), (".5", 0.5), ("+2", 2.0)],
    )
    def test_parses_decimal_syntax(self, value: str, expected: float) -> None:
        """Test plain decimal and exponent notation."""
        assert parse_number(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            "NA",
            "",
            "abc",
            "1,5",
            "1_000",
            "inf",
            "-Infinity",
            "NAN",
            "١٢٣",
            "１２",
            "٤.٥",
        ],
    )
    def test_rejects_missing_and_non_numbers(self, value: str) -> None:
        """Test missing tokens, non-finite values and non-ASCII digits."""
        assert parse_number(value) is None


def test_boolean_tokens_case_insensitive() -> None:
    """Test boolean spellings regardless of case."""
    for value in ["TRUE", "False", "yes", "NO", "1", "0"]:
        assert is_boolean_token(value)
    assert not is_boolean_token("maybe")
    assert not is_boolean_token("2")
