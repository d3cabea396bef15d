# ruff: noqa: E402
"""Pytest configuration and fixtures."""

import os

# Settings are read once and cached, so the test environment goes in first
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["AI_PROVIDER"] = "openai"
os.environ["OPENAI_API_KEY"] = "test-key"

from collections.abc import Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from flashdeck import models  # noqa: F401
from flashdeck.core import container
from flashdeck.database import Base, get_db
from flashdeck.main import app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def fake_ai_service() -> MagicMock:
    """AI flashcard service double; tests set what generate_flashcards returns."""
    service = MagicMock()
    service.model_name = "gpt-4o-mini"
    service.generate_flashcards = AsyncMock(return_value=[])
    return service


@pytest.fixture
def client(db_session: Session, fake_ai_service: MagicMock) -> Generator[TestClient, Any, None]:
    """Create a test client with database session and a fake AI service."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    container.ai_flashcard_service.override(providers.Object(fake_ai_service))

    with TestClient(app) as test_client:
        yield test_client

    container.ai_flashcard_service.reset_override()
    app.dependency_overrides.clear()
