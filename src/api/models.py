"""
API response models.

Pydantic models for response serialization and OpenAPI schema generation.
Request bodies are passed through untouched: field validation belongs to
the sign-up controller.
"""

from pydantic import BaseModel


class SignUpResponse(BaseModel):
    """Response model for successful sign-up."""

    id: str
    name: str
    email: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
    message: str
    param: str | None = None
