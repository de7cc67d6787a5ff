"""
Presentation errors - Error descriptors returned in HTTP response bodies.

These exceptions are never raised by the controller; they are built and
returned as response bodies so that every failure carries its kind and,
where applicable, the offending parameter name.
"""


class PresentationError(Exception):
    """Base class for errors surfaced to HTTP clients."""

    def __init__(self, message: str, param_name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.param_name = param_name

    @property
    def name(self) -> str:
        return type(self).__name__

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.param_name == other.param_name

    def __hash__(self) -> int:
        return hash((type(self), self.param_name))

    def __repr__(self) -> str:
        return f"{self.name}({self.param_name!r})"


class MissingParamError(PresentationError):
    """A required parameter is absent or empty."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Missing param: {param_name}", param_name)


class InvalidParamError(PresentationError):
    """A parameter is present but semantically invalid."""

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Invalid param: {param_name}", param_name)


class ServerError(PresentationError):
    """Unexpected fault. Deliberately carries no internal detail."""

    def __init__(self) -> None:
        super().__init__("Internal server error")

    def __repr__(self) -> str:
        return f"{self.name}()"
