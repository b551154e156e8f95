"""Form adapters - Request body decoders."""

from .urlencoded import decode_form_body

__all__ = ["decode_form_body"]
