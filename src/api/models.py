"""
API response models.

Pydantic models for JSON endpoints and OpenAPI schema generation.
The GCD routes answer with HTML or plain text and need no model.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str
