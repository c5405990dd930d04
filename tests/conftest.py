import os

# Select the in-memory database before the application modules read settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient

from barcode_inventory.main import app
from barcode_inventory.database import Base, engine, SessionLocal


@pytest.fixture(scope="function")
def client():
    """Create test client with fresh database for each test."""
    # Create tables; the app lifespan seeds the default categories
    Base.metadata.create_all(bind=engine)

    with TestClient(app) as test_client:
        yield test_client

    # Drop tables after test
    Base.metadata.drop_all(bind=engine)
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db_session():
    """Create database session for direct database access in tests."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def auth_headers(client):
    """Register a user and return an Authorization header for it."""
    response = client.post(
        "/api/auth/register",
        json={"name": "Test User", "email": "test@example.com", "password": "password123"}
    )
    token = response.json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def create_product(client, auth_headers):
    """Factory creating products through the API."""
    def _create(material, barcode, description="Test Product", category=None):
        payload = {"material": material, "barcode": barcode, "description": description}
        if category is not None:
            payload["category"] = category
        response = client.post("/api/products", json=payload, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()["product"]
    return _create
