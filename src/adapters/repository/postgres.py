"""
PostgreSQL repository adapter - Implements AddAccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
account persistence port using psycopg3 with raw SQL over an
AsyncConnectionPool.
"""

import logging
from pathlib import Path

from psycopg_pool import AsyncConnectionPool

from src.domain.exceptions import AccountCreationFailed
from src.domain.models import AccountModel, AddAccountModel

logger = logging.getLogger(__name__)


class PostgresAccountRepository:
    """
    Implements AddAccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 AsyncConnectionPool for database connections
        """
        self._pool = pool

    async def add(self, account: AddAccountModel) -> AccountModel:
        """
        Insert a new account and return the stored row.

        The identifier is generated by the database (gen_random_uuid()).

        Args:
            account: Account fields; password must already be hashed

        Returns:
            AccountModel built from the inserted row

        Raises:
            AccountCreationFailed: If the insert returned no row
        """
        sql = """
            INSERT INTO accounts (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING id, name, email, password
        """

        async with self._pool.connection() as conn, conn.cursor() as cursor:
            await cursor.execute(sql, (account.name, account.email, account.password))
            row = await cursor.fetchone()
            await conn.commit()

        if row is None:
            raise AccountCreationFailed(account.email)

        return AccountModel(id=str(row[0]), name=row[1], email=row[2], password=row[3])


async def run_migrations(pool: AsyncConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 AsyncConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            async with pool.connection() as conn:
                await conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
