"""Fixtures for end-to-end tests against the app with mocked infrastructure."""

import pytest
from fastapi.testclient import TestClient

from hunt.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client over a fresh app with in-memory storage.

    Each test gets its own container, so data never leaks between tests.
    """
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client


def register(
    client: TestClient,
    email: str = "ada@example.com",
    first_name: str = "Ada",
    last_name: str = "Lovelace",
    password: str = "correct horse",
) -> dict:
    """Register a user and return the response body."""
    response = client.post(
        "/api/auth/register",
        json={
            "firstName": first_name,
            "lastName": last_name,
            "email": email,
            "location": "London",
            "password": password,
            "confirmPassword": password,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(token: str) -> dict[str, str]:
    """Bearer authorization header for a token."""
    return {"Authorization": f"Bearer {token}"}


def create_post(client: TestClient, token: str, title: str = "My shot") -> dict:
    """Create a post as the token's user and return the post data."""
    response = client.post(
        "/api/posts",
        json={
            "title": title,
            "caption": "Taken at dawn",
            "imageUrl": "https://storage.test/1-dawn.png",
            "post": "The long story behind it",
        },
        headers=auth_headers(token),
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]
