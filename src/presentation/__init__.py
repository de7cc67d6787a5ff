"""
Presentation layer - Controllers and HTTP-shaped types.

Framework-agnostic: the api package adapts these types to FastAPI.
"""

from src.presentation.controllers import SignUpController
from src.presentation.errors import (
    InvalidParamError,
    MissingParamError,
    PresentationError,
    ServerError,
)
from src.presentation.protocols import Controller, HttpRequest, HttpResponse

__all__ = [
    "Controller",
    "HttpRequest",
    "HttpResponse",
    "InvalidParamError",
    "MissingParamError",
    "PresentationError",
    "ServerError",
    "SignUpController",
]
