"""
Account models - Plain data carriers for the sign-up flow.

These dataclasses cross layer boundaries: the presentation layer builds
an AddAccountModel, the data layer hashes its password, and the repository
returns the stored AccountModel.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AddAccountModel:
    """Fields required to create a new account."""

    name: str
    email: str
    password: str


@dataclass(frozen=True)
class AccountModel:
    """
    Stored account record.

    The password field always holds the hashed secret, never plaintext.
    """

    id: str
    name: str
    email: str
    password: str


@dataclass(frozen=True)
class AccountView:
    """Public representation of an account (no password)."""

    id: str
    name: str
    email: str

    @classmethod
    def from_account(cls, account: AccountModel) -> "AccountView":
        return cls(id=account.id, name=account.name, email=account.email)
