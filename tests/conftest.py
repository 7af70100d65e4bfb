"""Shared pytest fixtures."""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import pytest

from medcoders.config import Config
from medcoders.core.modules.user.models import User


class FakeClock:
    """Callable clock that tests move forward by hand."""

    def __init__(self, current: datetime) -> None:
        self.current = current

    def __call__(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


@pytest.fixture
def clock():
    """Clock fixed at 2024-05-01 12:00 UTC."""
    return FakeClock(datetime(2024, 5, 1, 12, 0, tzinfo=UTC))


@pytest.fixture
def config(tmp_path):
    """Development config with uploads under a temporary directory."""
    return Config(
        database_url="mongodb://localhost:27017/medcoders_test",
        session_secret_key="test-secret",
        uploads_path=str(tmp_path / "uploads"),
    )


@pytest.fixture
def mock_user():
    """Create a mock admin user for testing."""
    return User(
        id=UUID("87654321-4321-8765-4321-876543218765"),
        email="admin@example.com",
        name="Admin",
        password_hash="$2b$12$hashed_password_here",
    )
