"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.main import create_app


@pytest.fixture
def app():
    """Create a fresh application with a freshly seeded book store."""
    return create_app(Settings(seed_books=True, metrics_enabled=True))


@pytest.fixture
def client(app):
    """Create a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store(app):
    """The book store owned by the app under test."""
    return app.state.book_store


@pytest.fixture
def sample_book():
    """A complete book payload."""
    return {
        "title": "Dune",
        "author": "Frank Herbert",
        "genre": "Science Fiction",
        "copiesAvailable": 2,
    }
