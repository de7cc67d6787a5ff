"""
HTTP helpers - Response constructors that pair bodies with status codes.

Error bodies only ever leave through bad_request/server_error and success
bodies only through ok, keeping status code and body kind consistent.
"""

from typing import Any

from src.presentation.errors import PresentationError, ServerError
from src.presentation.protocols import HttpResponse


def bad_request(error: PresentationError) -> HttpResponse:
    """400 response carrying a validation error."""
    return HttpResponse(status_code=400, body=error)


def server_error() -> HttpResponse:
    """500 response carrying a detail-free ServerError."""
    return HttpResponse(status_code=500, body=ServerError())


def ok(data: Any) -> HttpResponse:
    """200 response carrying a result payload."""
    if isinstance(data, PresentationError):
        raise TypeError("ok() cannot carry an error body")
    return HttpResponse(status_code=200, body=data)
