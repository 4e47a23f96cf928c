"""
Integration tests for the admin API endpoints.
Uses TestClient over real use cases backed by the in-memory store (no real DB or SMTP).
"""
from unittest.mock import MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from approval_backend.api.v1.dependencies import get_current_user
from approval_backend.application.dto.user_dto import UserResponse
from approval_backend.application.use_cases.admin.decide_user import DecideUserUseCase
from approval_backend.application.use_cases.admin.get_user_stats import GetUserStatsUseCase
from approval_backend.application.use_cases.admin.list_users import ListUsersUseCase
from approval_backend.application.use_cases.admin.list_users_by_status import ListUsersByStatusUseCase
from approval_backend.application.use_cases.admin.send_welcome_email import SendWelcomeEmailUseCase
from approval_backend.domain.constants import UserRole, UserStatus
from approval_backend.domain.exceptions import UserStoreError

MISSING_ID = "ffffffffffffffffffffffff"


@pytest.fixture
def admin(user_repo):
    return user_repo.add(name="Admin User", email="admin@example.com", role=UserRole.ADMIN, status=UserStatus.APPROVED)


@pytest.fixture
def john(user_repo):
    return user_repo.add(name="John Doe", email="john@example.com")


@pytest.fixture
def mock_container(user_repo, email_service):
    container = MagicMock()
    container.get.side_effect = lambda cls: {
        DecideUserUseCase: DecideUserUseCase(user_repo, email_service),
        ListUsersByStatusUseCase: ListUsersByStatusUseCase(user_repo),
        ListUsersUseCase: ListUsersUseCase(user_repo),
        GetUserStatsUseCase: GetUserStatsUseCase(user_repo),
        SendWelcomeEmailUseCase: SendWelcomeEmailUseCase(user_repo, email_service),
    }.get(cls, None)
    return container


def _client_as(user, mock_container):
    from approval_backend.main import app

    app.dependency_overrides[get_current_user] = lambda: UserResponse.from_user(user)
    return app, patch("approval_backend.api.v1.admin_controller.get_container", return_value=mock_container)


@pytest.fixture
def client(admin, mock_container):
    """Test client authenticated as the admin."""
    app, container_patch = _client_as(admin, mock_container)
    with container_patch:
        yield TestClient(app)
    app.dependency_overrides.clear()


class TestAdminAPI:
    """Tests for /api/admin endpoints"""

    def test_pending_users(self, client, john):
        response = client.get("/api/admin/pending-users")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["count"] == 1
        assert body["data"][0]["email"] == "john@example.com"
        assert "password" not in body["data"][0]

    def test_approve_then_reject_conflict(self, client, user_repo, admin, john, email_service):
        response = client.put(f"/api/admin/approve-user/{john.id}")
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "User approved successfully"
        assert body["data"]["status"] == "approved"
        assert body["data"]["email_sent"] is True
        assert user_repo.users[john.id].approved_by == admin.id

        response = client.put(f"/api/admin/reject-user/{john.id}")
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "User is already approved"}
        assert email_service.notify.await_count == 1

    def test_reject_user(self, client, user_repo, john):
        response = client.put(f"/api/admin/reject-user/{john.id}")
        assert response.status_code == 200
        assert response.json()["message"] == "User rejected successfully"
        assert user_repo.users[john.id].status == UserStatus.REJECTED

    def test_decide_unknown_user_returns_404(self, client):
        response = client.put(f"/api/admin/approve-user/{MISSING_ID}")
        assert response.status_code == 404
        assert response.json()["message"] == "User not found"

    def test_store_failure_returns_generic_500(self, client, user_repo, john):
        async def broken(*args, **kwargs):
            raise UserStoreError("connection refused to mongo:27017")

        user_repo.find_by_id = broken
        response = client.put(f"/api/admin/approve-user/{john.id}")
        assert response.status_code == 500
        assert response.json()["message"] == "Server error"

    def test_stats(self, client, user_repo, john):
        user_repo.add(name="Jane Smith", email="jane@example.com", status=UserStatus.APPROVED)
        response = client.get("/api/admin/stats")
        assert response.status_code == 200
        assert response.json()["data"] == {
            "total_users": 2,
            "pending_users": 1,
            "approved_users": 1,
            "rejected_users": 0,
        }

    def test_all_users_excludes_admin(self, client, john):
        response = client.get("/api/admin/users")
        assert response.status_code == 200
        assert [u["email"] for u in response.json()["data"]] == ["john@example.com"]

    def test_send_welcome(self, client, john, email_service):
        response = client.post(f"/api/admin/send-welcome/{john.id}")
        assert response.status_code == 200
        assert response.json()["message"] == "Welcome email sent successfully"

        email_service.notify.return_value = False
        response = client.post(f"/api/admin/send-welcome/{john.id}")
        assert response.status_code == 500
        assert response.json()["message"] == "Failed to send welcome email"


class TestAdminGuard:
    """Admin routes reject non-admin callers"""

    def test_regular_user_forbidden(self, user_repo, mock_container, john):
        approved = user_repo.add(name="Jane Smith", email="jane@example.com", status=UserStatus.APPROVED)
        app, container_patch = _client_as(approved, mock_container)
        try:
            with container_patch:
                response = TestClient(app).get("/api/admin/stats")
        finally:
            app.dependency_overrides.clear()
        assert response.status_code == 403
        assert response.json()["message"] == "Admin access required"

    def test_missing_token_rejected(self):
        from approval_backend.main import app

        response = TestClient(app).get("/api/admin/stats")
        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Not authorized, no token"}
        assert response.headers["www-authenticate"] == "Bearer"
