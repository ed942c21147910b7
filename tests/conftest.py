import pytest
from fastapi.testclient import TestClient

from app.database import ProductStore
from app.main import create_app

@pytest.fixture
def store():
    return ProductStore()

@pytest.fixture
def app(store):
    return create_app(store=store)

@pytest.fixture
def client(app):
    return TestClient(app)
