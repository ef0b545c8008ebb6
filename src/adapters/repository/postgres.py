"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Name uniqueness is enforced by the primary key on accounts.name; the
insert relies on ON CONFLICT DO NOTHING so two concurrent registrations
for the same name cannot both succeed.
"""

import logging
from pathlib import Path

from psycopg_pool import ConnectionPool

logger = logging.getLogger(__name__)


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def save_account(
        self,
        name: str,
        real_name: str,
        password_hash: str,
        email: str | None,
        logged_in: bool,
    ) -> bool:
        """
        Atomically insert a new account.

        Args:
            name: Normalized player name (lowercase, stripped)
            real_name: Player name as typed
            password_hash: bcrypt-hashed password from domain layer
            email: Email address or None
            logged_in: Whether the session starts authenticated

        Returns:
            True if the account was created, False if the name is taken
        """
        sql = """
            INSERT INTO accounts (name, real_name, password_hash, email, logged_in, registered_at)
            VALUES (%s, %s, %s, %s, %s, NOW())
            ON CONFLICT (name) DO NOTHING
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (name, real_name, password_hash, email, logged_in))
            conn.commit()
            return cursor.rowcount == 1


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
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

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
