"""
Unit tests for GCD arithmetic and number parsing.

Tests pure domain functions:
- Euclidean gcd and its zero-operand precondition
- Left-to-right reduction over a number list
- Strict unsigned 64-bit parsing
"""

import pytest

from src.domain.gcd import U64_MAX, gcd, gcd_of, parse_u64

PAIRS = [
    (12, 18),
    (17, 5),
    (1, 1),
    (1, 999),
    (48, 180),
    (2**32, 2**20),
    (U64_MAX, 3),
    (U64_MAX, U64_MAX - 1),
    (600851475143, 6857),
]


class TestGcd:
    """Tests for the two-operand Euclidean algorithm."""

    def test_known_values(self) -> None:
        """Textbook values compute correctly."""
        assert gcd(12, 18) == 6
        assert gcd(17, 5) == 1
        assert gcd(48, 180) == 12
        assert gcd(2 * 3 * 5 * 11 * 17, 3 * 7 * 11 * 13 * 19) == 3 * 11

    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_commutative(self, a: int, b: int) -> None:
        """gcd(a, b) == gcd(b, a)."""
        assert gcd(a, b) == gcd(b, a)

    @pytest.mark.parametrize("a", [1, 2, 7, 12, 2**63, U64_MAX])
    def test_idempotent(self, a: int) -> None:
        """gcd(a, a) == a."""
        assert gcd(a, a) == a

    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_result_divides_both(self, a: int, b: int) -> None:
        """Result divides both operands."""
        d = gcd(a, b)
        assert a % d == 0
        assert b % d == 0

    def test_largest_u64_values(self) -> None:
        """Operands at the top of the u64 range are handled."""
        assert gcd(U64_MAX, U64_MAX) == U64_MAX
        assert gcd(2**63, 2**62) == 2**62

    def test_zero_first_operand_fails_assertion(self) -> None:
        """Zero first operand violates the precondition."""
        with pytest.raises(AssertionError):
            gcd(0, 5)

    def test_zero_second_operand_fails_assertion(self) -> None:
        """Zero second operand violates the precondition."""
        with pytest.raises(AssertionError):
            gcd(5, 0)


class TestGcdOf:
    """Tests for reduction over a number list."""

    def test_single_number_is_its_own_gcd(self) -> None:
        """A one-element list reduces to that element."""
        assert gcd_of([42]) == 42

    def test_two_numbers(self) -> None:
        """Two numbers reduce to their pairwise gcd."""
        assert gcd_of([12, 18]) == 6

    def test_many_numbers(self) -> None:
        """Reduction folds left to right across the list."""
        assert gcd_of([2 * 3 * 5 * 11 * 17, 3 * 7 * 11 * 13 * 19, 3 * 3 * 7 * 11 * 13]) == 33

    def test_coprime_member_gives_one(self) -> None:
        """Any coprime member drives the result to 1."""
        assert gcd_of([12, 18, 7, 24]) == 1

    def test_accepts_tuple(self) -> None:
        """Any sequence is accepted."""
        assert gcd_of((100, 75, 50)) == 25


class TestParseU64:
    """Tests for strict unsigned 64-bit parsing."""

    @pytest.mark.parametrize(
        ("literal", "expected"),
        [
            ("0", 0),
            ("12", 12),
            ("007", 7),
            ("+12", 12),
            ("18446744073709551615", U64_MAX),
        ],
    )
    def test_valid_literals(self, literal: str, expected: int) -> None:
        """Decimal ASCII literals within range are parsed."""
        assert parse_u64(literal) == expected

    @pytest.mark.parametrize(
        "literal",
        [
            "",
            "abc",
            "12a",
            "-1",
            "-0",
            "+",
            " 12",
            "12 ",
            "1_000",
            "1.5",
            "0x10",
            "1e3",
            "١٢",  # Arabic-Indic digits
            "18446744073709551616",
        ],
    )
    def test_invalid_literals(self, literal: str) -> None:
        """Anything that is not a u64 decimal literal is rejected."""
        assert parse_u64(literal) is None
