"""
Domain exceptions - Semantic error types for account creation.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class AccountError(Exception):
    """Base class for account domain errors."""

    pass


class AccountCreationFailed(AccountError):
    """Persistence did not return the created account."""

    pass
