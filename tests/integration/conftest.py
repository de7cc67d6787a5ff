"""
Shared fixtures for integration tests.

Integration tests need a running PostgreSQL (DATABASE_URL). They are
skipped when the database cannot be reached.
"""

from collections.abc import Callable, Generator

import psycopg
import pytest

from src.config.settings import get_settings

# Module-level marker for all integration tests
pytestmark = pytest.mark.integration


@pytest.fixture(scope="session")
def database_url() -> str:
    """Database URL, skipping the session's integration tests if unreachable."""
    url = get_settings().database_url
    try:
        with psycopg.connect(url, connect_timeout=2):
            pass
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not available: {e}")
    return url


@pytest.fixture
def clean_database(database_url: str) -> Generator[None, None, None]:
    """Clean accounts table before each test."""
    with psycopg.connect(database_url) as conn:
        conn.execute("DELETE FROM accounts")
    yield


@pytest.fixture
def fetch_account_row(database_url: str) -> Callable[[str], tuple | None]:
    """Helper to read a stored account row by email."""

    def fetch(email: str) -> tuple | None:
        with psycopg.connect(database_url) as conn:
            return conn.execute(
                "SELECT id, name, email, password FROM accounts WHERE email = %s",
                (email,),
            ).fetchone()

    return fetch
