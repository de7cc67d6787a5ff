"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Sign-up request bodies
- Controller stubs for the email validator and add-account use case
"""

from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest

from src.domain.models import AccountModel


@pytest.fixture
def signup_body() -> dict[str, Any]:
    """A sign-up body that passes every controller check."""
    return {
        "name": "any_name",
        "email": "any_email@gmail.com",
        "password": "any_password",
        "passwordConfirmation": "any_password",
    }


@pytest.fixture
def stored_account() -> AccountModel:
    """Account as returned by persistence (hashed password)."""
    return AccountModel(
        id="valid_id",
        name="valid_name",
        email="valid_email@mail.com",
        password="hashed_password",
    )


@pytest.fixture
def email_validator() -> Mock:
    """Email validator stub accepting every address."""
    validator = Mock()
    validator.is_valid.return_value = True
    return validator


@pytest.fixture
def add_account(stored_account: AccountModel) -> AsyncMock:
    """Add-account stub returning the stored account."""
    use_case = AsyncMock()
    use_case.add.return_value = stored_account
    return use_case
