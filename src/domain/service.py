"""
GCD domain service.

Turns decoded form data into a GCD result:

    FormData --(field 'n')--> literals --(parse_u64)--> NumberList --(gcd_of)--> GcdResult

Validation order is fixed: a missing 'n' field is reported before any
literal is parsed, and literals are checked left to right so the first
offending one is the one named in the error.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .exceptions import InvalidNumber, MissingNumbers, ZeroNumber
from .gcd import gcd_of, parse_u64

NUMBER_FIELD = "n"


@dataclass(frozen=True)
class GcdResult:
    """Numbers submitted and their greatest common divisor."""

    numbers: tuple[int, ...]
    divisor: int

    def to_html(self) -> str:
        """Render the result fragment returned to the browser."""
        numbers = list(self.numbers)
        return f"The greatest common divisor of the numbers {numbers} is <b>{self.divisor}</b>\n"


@dataclass
class GcdService:
    """
    Domain service for GCD computation.

    Orchestrates field lookup, number validation and reduction.
    """

    def compute(self, form_data: Mapping[str, Sequence[str]]) -> GcdResult:
        """
        Compute the GCD of the numbers submitted in form data.

        Args:
            form_data: Decoded form fields, each mapped to its values in order

        Returns:
            GcdResult holding the parsed numbers and their GCD

        Raises:
            MissingNumbers: If the form has no 'n' field
            InvalidNumber: If an 'n' value is not an unsigned 64-bit integer
            ZeroNumber: If an 'n' value is zero
        """
        literals = form_data.get(NUMBER_FIELD)
        if not literals:
            raise MissingNumbers()

        numbers = tuple(self._parse(literal) for literal in literals)
        return GcdResult(numbers=numbers, divisor=gcd_of(numbers))

    def _parse(self, literal: str) -> int:
        value = parse_u64(literal)
        if value is None:
            raise InvalidNumber(literal)
        if value == 0:
            raise ZeroNumber(literal)
        return value
