"""
GCD arithmetic and number parsing.

Pure functions with no framework imports:
- gcd: Euclidean algorithm on two positive integers
- gcd_of: left-to-right reduction over a non-empty sequence
- parse_u64: strict unsigned 64-bit integer parsing
"""

import re
from collections.abc import Sequence

U64_MAX = 2**64 - 1

# ASCII digits only; str.isdigit() would also accept other Unicode digits
_U64_PATTERN = re.compile(r"\+?[0-9]+", re.ASCII)


def gcd(n: int, m: int) -> int:
    """
    Greatest common divisor of two positive integers.

    Both operands must be non-zero. Violating this is a programming
    error and fails the assertion.
    """
    assert n != 0 and m != 0
    while m != 0:
        if m < n:
            n, m = m, n
        m = m % n
    return n


def gcd_of(numbers: Sequence[int]) -> int:
    """Reduce numbers with pairwise gcd, seeding with the first element."""
    d = numbers[0]
    for m in numbers[1:]:
        d = gcd(d, m)
    return d


def parse_u64(literal: str) -> int | None:
    """
    Parse a decimal literal as an unsigned 64-bit integer.

    Accepts an optional leading '+'. Rejects whitespace, signs other than
    '+', non-ASCII digits and values above U64_MAX.

    Returns:
        The parsed value, or None if the literal is not a valid u64
    """
    if not _U64_PATTERN.fullmatch(literal):
        return None
    value = int(literal)
    if value > U64_MAX:
        return None
    return value
