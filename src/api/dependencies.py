"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for wiring the sign-up
controller to its use case and infrastructure adapters.
"""

from fastapi import Depends, Request
from psycopg_pool import AsyncConnectionPool

from src.adapters.cryptography.bcrypt_adapter import BcryptAdapter
from src.adapters.repository.postgres import PostgresAccountRepository
from src.adapters.validators.email_validator_adapter import EmailValidatorAdapter
from src.config.settings import get_settings
from src.data.usecases.db_add_account import DbAddAccount
from src.presentation.controllers.signup import SignUpController
from src.presentation.protocols import Controller

# Module-level singleton - EmailValidatorAdapter is stateless
_email_validator = EmailValidatorAdapter()


def get_pool(request: Request) -> AsyncConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_account_repository(
    pool: AsyncConnectionPool = Depends(get_pool),
) -> PostgresAccountRepository:
    """Create repository with connection pool from app state."""
    return PostgresAccountRepository(pool)


def get_encrypter() -> BcryptAdapter:
    """Create bcrypt adapter with the configured cost factor."""
    return BcryptAdapter(rounds=get_settings().bcrypt_cost)


def get_email_validator() -> EmailValidatorAdapter:
    """Get email validator adapter (singleton)."""
    return _email_validator


def get_add_account(
    encrypter: BcryptAdapter = Depends(get_encrypter),
    repository: PostgresAccountRepository = Depends(get_account_repository),
) -> DbAddAccount:
    """Compose the add-account use case."""
    return DbAddAccount(encrypter=encrypter, add_account_repository=repository)


def get_signup_controller(
    email_validator: EmailValidatorAdapter = Depends(get_email_validator),
    add_account: DbAddAccount = Depends(get_add_account),
) -> Controller:
    """
    Create sign-up controller with injected dependencies.

    Wires together the email validator and add-account use case.
    """
    return SignUpController(email_validator=email_validator, add_account=add_account)
