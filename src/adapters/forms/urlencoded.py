"""
URL-encoded form body decoder.

Decodes an application/x-www-form-urlencoded request body into a mapping
of field name to the list of submitted values, preserving submission
order and blank values. Any decoding problem is reported as the domain's
MalformedFormData so the route can answer with a single 400 path.
"""

from urllib.parse import parse_qs

from src.domain.exceptions import MalformedFormData


def decode_form_body(body: bytes) -> dict[str, list[str]]:
    """
    Decode a URL-encoded body.

    Parsing is lenient about structure: empty segments are skipped and a
    field without '=' is read as a blank value. The body and its
    percent-escapes must decode to UTF-8.

    Args:
        body: Raw request body

    Returns:
        Mapping of field name to its values in submission order

    Raises:
        MalformedFormData: If the body is empty or is not valid UTF-8
    """
    if not body:
        raise MalformedFormData("empty form body")

    try:
        text = body.decode("utf-8")
        return parse_qs(text, keep_blank_values=True, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as e:
        raise MalformedFormData(str(e)) from e
