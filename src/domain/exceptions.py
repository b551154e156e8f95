"""
Domain exceptions - Semantic error types for GCD input validation.

This module defines domain-specific exceptions that describe why a
submitted form cannot be turned into a GCD computation. Each message
is the exact diagnostic returned to the client.
"""

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\0": "\\0",
}


def quote_literal(literal: str) -> str:
    """
    Double-quote a submitted literal for use in a diagnostic.

    Backslashes, double quotes and common control characters get backslash
    escapes; other unprintable characters become \\u{hex}.
    """
    escaped = []
    for char in literal:
        if char in _ESCAPES:
            escaped.append(_ESCAPES[char])
        elif not char.isprintable():
            escaped.append(f"\\u{{{ord(char):x}}}")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'


class GcdInputError(Exception):
    """Base class for rejected GCD submissions."""

    pass


class MalformedFormData(GcdInputError):
    """Request body is not decodable URL-encoded form data."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Error parsing form data: {reason}")


class MissingNumbers(GcdInputError):
    """Form data carries no 'n' field."""

    def __init__(self) -> None:
        super().__init__("Form data has no 'n' parameter")


class InvalidNumber(GcdInputError):
    """An 'n' value is not an unsigned 64-bit integer."""

    def __init__(self, literal: str) -> None:
        self.literal = literal
        super().__init__(f"Value for 'n' parameter not a number: {quote_literal(literal)}")


class ZeroNumber(GcdInputError):
    """An 'n' value parsed to zero, which has no defined GCD here."""

    def __init__(self, literal: str) -> None:
        self.literal = literal
        super().__init__(f"Value for 'n' parameter must be non-zero: {quote_literal(literal)}")
