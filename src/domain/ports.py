"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the sign-up flow requires
from its collaborators. Adapters implement these protocols structurally.
"""

from typing import Protocol

from .models import AccountModel, AddAccountModel


class EmailValidator(Protocol):
    """Port interface for email format validation."""

    def is_valid(self, email: str) -> bool:
        """
        Check whether an email address is well formed.

        Must not mutate its input. May raise; callers treat any
        exception as a server fault.
        """
        ...


class Encrypter(Protocol):
    """Port interface for one-way secret transformation."""

    async def encrypt(self, value: str) -> str:
        """
        Hash a plaintext secret.

        Args:
            value: Plaintext secret (e.g. a password)

        Returns:
            One-way transformed value safe for storage
        """
        ...


class AddAccountRepository(Protocol):
    """Port interface for account persistence."""

    async def add(self, account: AddAccountModel) -> AccountModel:
        """
        Persist a new account.

        Args:
            account: Account fields with an already hashed password

        Returns:
            The stored account including its generated identifier
        """
        ...


class AddAccount(Protocol):
    """Port interface for the add-account use case."""

    async def add(self, account: AddAccountModel) -> AccountModel:
        """Create an account from plaintext sign-up fields."""
        ...
