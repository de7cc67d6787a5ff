"""Controllers - Request handlers composed from injected ports."""

from src.presentation.controllers.signup import SignUpController

__all__ = ["SignUpController"]
