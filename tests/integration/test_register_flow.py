"""
Integration tests for the register command flow.

Tests the full /register flow through the API with a real database.
Requires PostgreSQL to be running (via docker-compose).
"""

import logging
import re

import bcrypt
import pytest
from fastapi.testclient import TestClient
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.main import app
from src.config.settings import Settings, get_settings

pytestmark = pytest.mark.integration


@pytest.fixture(scope="module")
def pool() -> ConnectionPool:
    """Create connection pool for integration tests."""
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture(autouse=True)
def clean_database(pool: ConnectionPool) -> None:
    """Clean accounts table before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM accounts")
        conn.commit()
    yield


@pytest.fixture
def use_settings(monkeypatch: pytest.MonkeyPatch):
    """Replace the cached settings for the duration of a test."""

    def apply(**overrides) -> None:
        settings = Settings(**overrides)
        monkeypatch.setattr("src.api.dependencies.get_settings", lambda: settings)

    return apply


@pytest.fixture
def client(pool: ConnectionPool) -> TestClient:
    """Create test client with real database connection."""
    # Override the app's pool with our test pool
    app.state.pool = pool
    return TestClient(app)


def register(client: TestClient, name: str, *arguments: str, kind: str = "player") -> list[str]:
    response = client.post(
        "/v1/commands/register",
        json={"sender": {"name": name, "kind": kind}, "arguments": list(arguments)},
    )
    assert response.status_code == 200
    return response.json()["messages"]


class TestPasswordRegistrationFlow:
    """End-to-end password registration."""

    def test_full_registration_flow(
        self, client: TestClient, pool: ConnectionPool, use_settings
    ) -> None:
        """A player registers, is logged in and the hash is stored."""
        use_settings(registration_type="PASSWORD")

        messages = register(client, "Bobby", "secure123")

        assert messages == ["Successfully registered!", "Successful login!"]
        with pool.connection() as conn:
            row = conn.execute(
                "SELECT real_name, password_hash, email, logged_in FROM accounts WHERE name = %s",
                ("bobby",),
            ).fetchone()
        assert row[0] == "Bobby"
        assert bcrypt.checkpw(b"secure123", row[1].encode())
        assert row[2] is None
        assert row[3] is True

    def test_duplicate_registration(self, client: TestClient, use_settings) -> None:
        """Registering the same name twice reports it as taken."""
        use_settings(registration_type="PASSWORD")
        register(client, "Bobby", "secure123")

        messages = register(client, "BOBBY", "other456")

        assert messages == ["You already have registered this username!"]

    def test_console_cannot_register(self, client: TestClient, pool: ConnectionPool) -> None:
        """Console senders create no account."""
        messages = register(client, "CONSOLE", "secure123", kind="console")

        assert messages == ["Player only!"]
        with pool.connection() as conn:
            assert conn.execute("SELECT COUNT(*) FROM accounts").fetchone()[0] == 0


class TestEmailRegistrationFlow:
    """End-to-end email registration."""

    def test_recovery_password_mailed(
        self,
        client: TestClient,
        pool: ConnectionPool,
        use_settings,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """A generated password is mailed and matches the stored hash."""
        use_settings(
            registration_type="EMAIL_WITH_CONFIRMATION",
            recovery_password_length=10,
            mail_account="server@example.org",
            mail_password="secret",
        )

        with caplog.at_level(logging.INFO):
            messages = register(client, "Alice", "alice@example.org", "alice@example.org")

        assert messages[0] == "Successfully registered!"
        match = re.search(r"Password: ([a-z0-9]+)", caplog.text)
        assert match is not None
        password = match.group(1)
        assert len(password) == 10

        with pool.connection() as conn:
            row = conn.execute(
                "SELECT password_hash, email FROM accounts WHERE name = %s", ("alice",)
            ).fetchone()
        assert bcrypt.checkpw(password.encode(), row[0].encode())
        assert row[1] == "alice@example.org"

    def test_incomplete_mail_settings(
        self, client: TestClient, pool: ConnectionPool, use_settings
    ) -> None:
        """Without mail credentials no account is created."""
        use_settings(registration_type="EMAIL")

        messages = register(client, "Alice", "alice@example.org")

        assert messages == [
            "Error: not all required settings are set for sending emails. "
            "Please contact an admin."
        ]
        with pool.connection() as conn:
            assert conn.execute("SELECT COUNT(*) FROM accounts").fetchone()[0] == 0
