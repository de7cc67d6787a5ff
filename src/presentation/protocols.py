"""
Presentation protocols - Transport-neutral request/response types.

Controllers receive an HttpRequest and return an HttpResponse; binding
them to a concrete web framework happens in the api package.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class HttpRequest:
    """Incoming request: an opaque bag of named body fields."""

    body: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpResponse:
    """Outgoing response. Never mutated after construction."""

    status_code: int
    body: Any


class Controller(Protocol):
    """Port interface for request handlers."""

    async def handle(self, request: HttpRequest) -> HttpResponse:
        """Handle a request. Must not raise."""
        ...
