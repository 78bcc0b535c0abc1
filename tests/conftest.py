"""Shared test fixtures for pytest."""

from unittest.mock import MagicMock, Mock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError


@pytest.fixture
def clean_env(monkeypatch):
    """Process environment without database credentials."""
    monkeypatch.delenv("POSTGRES_USER", raising=False)
    monkeypatch.delenv("POSTGRES_PASSWORD", raising=False)
    return monkeypatch


@pytest.fixture
def live_engine():
    """In-memory engine that accepts the liveness probe."""
    engine = create_engine("sqlite://")
    yield engine
    engine.dispose()


def failing_engine(detail: str) -> Mock:
    """Engine whose connect() fails the way psycopg2 does."""
    engine = MagicMock(spec=Engine)
    engine.connect.side_effect = OperationalError(
        "SELECT 1", None, Exception(detail)
    )
    return engine


@pytest.fixture
def unreachable_engine() -> Mock:
    return failing_engine(
        'could not translate host name "dev_pg" to address: Name or service not known'
    )


@pytest.fixture
def rejecting_engine() -> Mock:
    return failing_engine('password authentication failed for user "app"')
