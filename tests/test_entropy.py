"""
Tests for entropy estimation
============================
"""

import math

import pytest

from randpass import criteria as c
from randpass.entropy import (
    ENTROPY_THRESHOLD,
    calculate_entropy,
    calculate_password_entropy,
    log2_binomial_coefficient,
    log2_factorial,
    suggest_password_length,
)
from randpass.exc import TooManyExtraCharsError


def approx(value: float):
    return pytest.approx(value, abs=1e-6)


class TestLog2Factorial:
    """Tests for log2_factorial."""

    def test_zero(self):
        assert log2_factorial(0) == 0.0

    def test_small_values(self):
        assert log2_factorial(1) == approx(0.0)
        assert log2_factorial(5) == approx(math.log2(120))
        assert log2_factorial(10) == approx(math.log2(3628800))


class TestLog2BinomialCoefficient:
    """Tests for log2_binomial_coefficient."""

    @pytest.mark.parametrize("n, k", [(0, 0), (5, 0), (10, 5), (10, 10), (20, 15)])
    def test_matches_math_comb(self, n, k):
        assert log2_binomial_coefficient(n, k) == approx(math.log2(math.comb(n, k)))

    def test_k_greater_than_n(self):
        with pytest.raises(ValueError):
            log2_binomial_coefficient(3, 4)


class TestCalculateEntropy:
    """Tests for calculate_entropy."""

    def test_without_extra_chars(self):
        assert calculate_entropy(10, 62) == approx(10 * math.log2(62))

    def test_distinct_extra_chars_fill_password(self):
        """Five distinct forced chars: only their 5! orderings remain."""
        assert calculate_entropy(5, 62, [1, 1, 1, 1, 1]) == approx(log2_factorial(5))

    def test_identical_extra_chars_fill_password(self):
        assert calculate_entropy(5, 62, [5]) == approx(0.0)

    def test_repeated_extra_chars(self):
        expected = (
            log2_binomial_coefficient(20, 15)
            + log2_factorial(15)
            - sum(log2_factorial(k) for k in (5, 4, 3, 2, 1))
            + 5 * math.log2(62)
        )
        assert calculate_entropy(20, 62, [5, 4, 3, 2, 1]) == approx(expected)

    def test_extra_chars_with_free_positions(self):
        expected = (
            log2_binomial_coefficient(10, 5) + log2_factorial(5) + 5 * math.log2(62)
        )
        assert calculate_entropy(10, 62, [1, 1, 1, 1, 1]) == approx(expected)

    def test_counts_distinct_passwords(self):
        """Brute-force check: length 3, charset of 2, one forced char."""
        # strings over {a, b} of length 3 with one forced 'x' placed anywhere:
        # 3 positions for 'x' times 2**2 fillings
        assert calculate_entropy(3, 2, [1]) == approx(math.log2(3 * 4))

    @pytest.mark.parametrize("length", [0, 1, 7, 20])
    def test_empty_extra_chars_equal_no_extra_chars(self, length):
        assert calculate_entropy(length, 62, []) == approx(calculate_entropy(length, 62))

    def test_single_char_charset(self):
        assert calculate_entropy(100, 1) == 0.0

    def test_too_many_extra_chars(self):
        with pytest.raises(TooManyExtraCharsError) as exc_info:
            calculate_entropy(4, 62, [2, 3])
        assert exc_info.value.ctx == {"password_length": 4, "extra_chars": 5}
        assert str(exc_info.value) == "too many extra characters"


class TestCalculatePasswordEntropy:
    """Tests for the criteria-based shortcut."""

    def test_alphanumeric(self):
        assert calculate_password_entropy(10, c.Alphanumeric()) == approx(
            10 * math.log2(62)
        )

    def test_distinct_extra_chars(self):
        assert calculate_password_entropy(5, c.Alphanumeric(), b"01234") == approx(
            log2_factorial(5)
        )

    def test_identical_extra_chars(self):
        assert calculate_password_entropy(5, c.Alphanumeric(), b"00000") == approx(0.0)

    def test_extra_chars_grow_the_charset(self):
        """Symbols join the charset used for the free positions."""
        expected = (
            log2_binomial_coefficient(12, 2) + log2_factorial(2) + 10 * math.log2(64)
        )
        assert calculate_password_entropy(12, c.Alphanumeric(), b"!@") == approx(
            expected
        )


class TestSuggestPasswordLength:
    """Tests for suggest_password_length."""

    def test_alphanumeric(self):
        assert suggest_password_length(62) == 13

    def test_reaches_threshold(self):
        length = suggest_password_length(10)
        assert calculate_entropy(length, 10) >= ENTROPY_THRESHOLD
        assert calculate_entropy(length - 1, 10) < ENTROPY_THRESHOLD

    def test_single_char_charset(self):
        assert suggest_password_length(1) is None

    def test_skips_lengths_shorter_than_extra_chars(self):
        """Lengths below the forced char count are skipped, not fatal."""
        length = suggest_password_length(62, [1] * 20)
        assert length is not None
        assert length >= 20
        assert calculate_entropy(length, 62, [1] * 20) >= ENTROPY_THRESHOLD

    def test_gives_up_on_impractical_lengths(self):
        # only length 999 fits the forced chars, and it has no free position left
        assert suggest_password_length(2, [999]) is None
