"""
Integration tests for auth API endpoints.
Uses TestClient with mocked use cases (no real DB).
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from approval_backend.application.dto.auth_dto import TokenResponse
from approval_backend.application.dto.user_dto import UserResponse
from approval_backend.application.use_cases.auth.login_user import LoginUserUseCase
from approval_backend.application.use_cases.auth.register_user import RegisterUserUseCase
from approval_backend.domain.exceptions import AccountNotApprovedError, DuplicateEmailError


@pytest.fixture
def mock_register_use_case():
    return AsyncMock(spec=RegisterUserUseCase)


@pytest.fixture
def mock_login_use_case():
    return AsyncMock(spec=LoginUserUseCase)


@pytest.fixture
def mock_container(mock_register_use_case, mock_login_use_case):
    container = MagicMock()
    container.get.side_effect = lambda cls: {
        RegisterUserUseCase: mock_register_use_case,
        LoginUserUseCase: mock_login_use_case,
    }.get(cls, None)
    return container


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container."""
    from approval_backend.main import app

    with patch("approval_backend.api.v1.auth_controller.get_container", return_value=mock_container):
        yield TestClient(app)


class TestAuthAPI:
    """Tests for /api/auth endpoints"""

    def test_register_success(self, client, mock_register_use_case):
        mock_register_use_case.execute.return_value = UserResponse(
            id="usr-1",
            name="Test User",
            email="test@example.com",
            role="user",
            status="pending",
        )
        response = client.post(
            "/api/auth/register",
            json={"name": "Test User", "email": "test@example.com", "password": "password123"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "test@example.com"
        assert data["status"] == "pending"

    def test_register_duplicate_returns_400(self, client, mock_register_use_case):
        mock_register_use_case.execute.side_effect = DuplicateEmailError("existing@example.com")
        response = client.post(
            "/api/auth/register",
            json={"name": "Test", "email": "existing@example.com", "password": "password123"},
        )
        assert response.status_code == 400
        assert response.json()["message"] == "User with this email already exists"

    def test_register_short_password_rejected(self, client, mock_register_use_case):
        response = client.post(
            "/api/auth/register",
            json={"name": "Test", "email": "test@example.com", "password": "short"},
        )
        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["message"].startswith("password: ")
        mock_register_use_case.execute.assert_not_awaited()

    def test_register_password_over_72_bytes_rejected(self, client, mock_register_use_case):
        # 40 characters but 80 bytes in UTF-8
        response = client.post(
            "/api/auth/register",
            json={"name": "Test", "email": "test@example.com", "password": "\u00e9" * 40},
        )
        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["message"].startswith("password: ")
        assert "at most 72 bytes" in body["message"]
        mock_register_use_case.execute.assert_not_awaited()

    def test_register_password_of_72_bytes_accepted(self, client, mock_register_use_case):
        mock_register_use_case.execute.return_value = UserResponse(
            id="u1", name="Test", email="test@example.com", role="user", status="pending"
        )
        response = client.post(
            "/api/auth/register",
            json={"name": "Test", "email": "test@example.com", "password": "\u00e9" * 36},
        )
        assert response.status_code == 201
        mock_register_use_case.execute.assert_awaited_once()

    def test_login_success(self, client, mock_login_use_case):
        mock_login_use_case.execute.return_value = TokenResponse(access_token="jwt.token.here")
        response = client.post(
            "/api/auth/login",
            json={"email": "test@example.com", "password": "validpass123"},
        )
        assert response.status_code == 200
        assert response.json()["access_token"] == "jwt.token.here"

    def test_login_invalid_returns_401(self, client, mock_login_use_case):
        mock_login_use_case.execute.return_value = None
        response = client.post(
            "/api/auth/login",
            json={"email": "test@example.com", "password": "wrongpass123"},
        )
        assert response.status_code == 401

    def test_login_pending_returns_403(self, client, mock_login_use_case):
        mock_login_use_case.execute.side_effect = AccountNotApprovedError("pending")
        response = client.post(
            "/api/auth/login",
            json={"email": "test@example.com", "password": "validpass123"},
        )
        assert response.status_code == 403
        assert response.json()["message"] == "Account is pending"


class TestAppShell:
    """Tests for the root route and error envelope"""

    def test_home(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["endpoints"]["admin"] == "/api/admin"

    def test_unknown_route(self, client):
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Route not found"}
