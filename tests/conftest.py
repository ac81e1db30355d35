import pytest
from fastapi.testclient import TestClient

from blog_api.app.main import create_app


@pytest.fixture
def app():
    """Fresh application with empty stores per test."""
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)
