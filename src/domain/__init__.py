"""
Domain layer - Pure GCD logic with zero framework imports.

This package contains number parsing, the Euclidean algorithm and the
service that validates submitted form data before computing a result.
"""

from .exceptions import (
    GcdInputError,
    InvalidNumber,
    MalformedFormData,
    MissingNumbers,
    ZeroNumber,
    quote_literal,
)
from .gcd import U64_MAX, gcd, gcd_of, parse_u64
from .service import GcdResult, GcdService

__all__ = [
    "GcdInputError",
    "GcdResult",
    "GcdService",
    "InvalidNumber",
    "MalformedFormData",
    "MissingNumbers",
    "U64_MAX",
    "ZeroNumber",
    "gcd",
    "gcd_of",
    "parse_u64",
    "quote_literal",
]
