"""End-to-end tests for registration and login."""

from tests.e2e.conftest import auth_headers, register


class TestRegister:
    """Tests for POST /api/auth/register."""

    def test_register_returns_token_and_user(self, client):
        """Should create the account and sign it in."""
        # Act
        body = register(client)

        # Assert
        assert body["success"] is True
        assert body["token"]
        user = body["user"]
        assert user["email"] == "ada@example.com"
        assert user["firstName"] == "Ada"
        assert user["lastName"] == "Lovelace"
        assert user["location"] == "London"
        assert "passwordHash" not in user
        assert "password" not in user

    def test_duplicate_email(self, client):
        """Should refuse a second account with the same email."""
        # Arrange
        register(client)

        # Act
        response = client.post(
            "/api/auth/register",
            json={
                "firstName": "Ada",
                "lastName": "Byron",
                "email": "ADA@example.com",
                "location": "Paris",
                "password": "another password",
            },
        )

        # Assert
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "User already exists"}

    def test_password_mismatch(self, client):
        response = client.post(
            "/api/auth/register",
            json={
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.com",
                "location": "London",
                "password": "correct horse",
                "confirmPassword": "correct horsf",
            },
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Passwords do not match"

    def test_missing_field(self, client):
        """Should reject a body without required fields."""
        response = client.post(
            "/api/auth/register",
            json={"firstName": "Ada", "email": "ada@example.com"},
        )

        assert response.status_code == 422
        assert response.json()["success"] is False


class TestLogin:
    """Tests for POST /api/auth/login."""

    def test_login_returns_working_token(self, client):
        """A token from login authorizes later requests."""
        # Arrange
        registered = register(client)

        # Act
        response = client.post(
            "/api/auth/login",
            json={"email": "ada@example.com", "password": "correct horse"},
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["user"]["id"] == registered["user"]["id"]

        me = client.get("/api/users/me", headers=auth_headers(body["token"]))
        assert me.status_code == 200
        assert me.json()["data"]["id"] == registered["user"]["id"]

    def test_wrong_password(self, client):
        register(client)

        response = client.post(
            "/api/auth/login",
            json={"email": "ada@example.com", "password": "wrong horse"},
        )

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid credentials"}

    def test_unknown_email(self, client):
        response = client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": "correct horse"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"


class TestBearerAuth:
    """Tests for token checks on protected routes."""

    def test_missing_token(self, client):
        response = client.get("/api/users/me")

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Not authenticated"}

    def test_invalid_token(self, client):
        response = client.get("/api/users/me", headers=auth_headers("not-a-token"))

        assert response.status_code == 401
        assert response.json()["success"] is False


class TestHealth:
    """Tests for the health check."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
