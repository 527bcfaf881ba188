import pytest
from fastapi.testclient import TestClient

from string_analyzer.main import create_app
from string_analyzer.store import StringStore


@pytest.fixture
def app():
    """Fresh application with an empty store for every test."""
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def store(app) -> StringStore:
    return app.state.store


@pytest.fixture
def seeded_client(client):
    """Client whose store already holds a small mixed set of strings."""
    for value in ["racecar", "hello", "A man am a", "hello world", "level", "Zebra crossing ahead"]:
        response = client.post("/strings", json={"value": value})
        assert response.status_code == 201
    return client
