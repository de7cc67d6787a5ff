"""
Unit tests for domain models, ports and exceptions.

Tests verify:
- Models are immutable and AccountView drops the password
- Port interfaces are properly defined
- Domain purity (zero framework imports)
"""

import subprocess
from dataclasses import FrozenInstanceError

import pytest

from src.domain.exceptions import AccountCreationFailed, AccountError
from src.domain.models import AccountModel, AccountView, AddAccountModel
from src.domain.ports import AddAccount, AddAccountRepository, EmailValidator, Encrypter


class TestModels:
    """Tests for account models."""

    def test_account_view_drops_password(self) -> None:
        """AccountView keeps id, name and email only."""
        account = AccountModel(id="1", name="n", email="e@mail.com", password="hash")

        view = AccountView.from_account(account)

        assert view == AccountView(id="1", name="n", email="e@mail.com")
        assert not hasattr(view, "password")

    def test_models_are_frozen(self) -> None:
        """Models cannot be mutated."""
        model = AddAccountModel(name="n", email="e", password="p")
        with pytest.raises(FrozenInstanceError):
            model.password = "other"  # type: ignore[misc]


class TestPorts:
    """Tests for port interfaces."""

    def test_email_validator_has_is_valid(self) -> None:
        assert hasattr(EmailValidator, "is_valid")

    def test_encrypter_has_encrypt(self) -> None:
        assert hasattr(Encrypter, "encrypt")

    def test_repository_has_add(self) -> None:
        assert hasattr(AddAccountRepository, "add")

    def test_add_account_has_add(self) -> None:
        assert hasattr(AddAccount, "add")


class TestDomainExceptions:
    """Tests for domain exceptions."""

    def test_account_error_is_exception(self) -> None:
        assert issubclass(AccountError, Exception)

    def test_creation_failed_inherits_account_error(self) -> None:
        assert issubclass(AccountCreationFailed, AccountError)


class TestDomainPurity:
    """Tests for domain purity - zero framework imports."""

    @pytest.mark.parametrize(
        "pattern",
        [
            "from fastapi",
            "import fastapi",
            "from pydantic",
            "import pydantic",
            "from psycopg",
            "import psycopg",
            "import bcrypt",
        ],
    )
    def test_no_framework_imports_in_domain(self, pattern: str) -> None:
        """Domain layer imports no framework or infrastructure library."""
        result = subprocess.run(
            ["grep", "-r", pattern, "src/domain/"],
            capture_output=True,
            text=True,
        )
        assert result.returncode != 0, f"Forbidden import found: {result.stdout}"
