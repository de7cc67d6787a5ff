"""
Domain layer - Pure business types with zero framework imports.

This package contains the account models and the port interfaces the
sign-up flow depends on, keeping infrastructure behind Protocols.
"""

from .exceptions import AccountCreationFailed, AccountError
from .models import AccountModel, AccountView, AddAccountModel
from .ports import AddAccount, AddAccountRepository, EmailValidator, Encrypter

__all__ = [
    "AccountCreationFailed",
    "AccountError",
    "AccountModel",
    "AccountView",
    "AddAccount",
    "AddAccountModel",
    "AddAccountRepository",
    "EmailValidator",
    "Encrypter",
]
