"""
Shared pytest fixtures for approval-backend tests.
"""
import itertools
import os
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from approval_backend.domain.constants import UserRole, UserStatus
from approval_backend.domain.exceptions import DuplicateEmailError
from approval_backend.domain.models.user import User
from approval_backend.domain.repositories.user_repository import UserRepository
from approval_backend.utils.email_service import EmailNotificationService


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository with the same conditional-update semantics as Mongo."""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}
        self._ids = itertools.count(1)
        self._clock = datetime(2025, 1, 1, tzinfo=timezone.utc)

    def add(self, **fields) -> User:
        fields.setdefault("hashed_password", "$2b$12$hashed")
        fields.setdefault("created_at", self._tick())
        user = User(id=f"{next(self._ids):024x}", **fields)
        self.users[user.id] = user
        return replace(user)

    def _tick(self) -> datetime:
        self._clock += timedelta(minutes=1)
        return self._clock

    async def find_by_email(self, email: str) -> Optional[User]:
        email = (email or "").strip().lower()
        for user in self.users.values():
            if user.email == email:
                return replace(user)
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        user = self.users.get(user_id)
        return replace(user) if user else None

    async def find_by_ids(self, user_ids: List[str]) -> List[User]:
        return [replace(self.users[uid]) for uid in user_ids if uid in self.users]

    async def find_first_admin(self) -> Optional[User]:
        for user in self.users.values():
            if user.role == UserRole.ADMIN:
                return replace(user)
        return None

    def _matching(self, status: Optional[str], role: Optional[str]) -> List[User]:
        return [
            user for user in self.users.values()
            if (status is None or user.status == status) and (role is None or user.role == role)
        ]

    async def list_users(self, status: Optional[str] = None, role: Optional[str] = None) -> List[User]:
        users = sorted(self._matching(status, role), key=lambda u: u.created_at, reverse=True)
        return [replace(user) for user in users]

    async def count_users(self, status: Optional[str] = None, role: Optional[str] = None) -> int:
        return len(self._matching(status, role))

    async def save(self, user: User) -> User:
        existing = await self.find_by_email(user.email)
        if existing is not None and existing.id != user.id:
            raise DuplicateEmailError(user.email)
        if user.id is None:
            user = replace(user, id=f"{next(self._ids):024x}", created_at=user.created_at or self._tick())
        self.users[user.id] = replace(user, email=user.email.lower())
        return replace(self.users[user.id])

    async def apply_decision(self, user_id, status, decided_by, decided_at) -> Optional[User]:
        user = self.users.get(user_id)
        if user is None or user.status != UserStatus.PENDING:
            return None
        self.users[user_id] = replace(user, status=status, approved_by=decided_by, approved_at=decided_at)
        return replace(self.users[user_id])

    async def delete_all(self) -> int:
        count = len(self.users)
        self.users.clear()
        return count


@pytest.fixture
def user_repo():
    """In-memory user store."""
    return InMemoryUserRepository()


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def email_service():
    """Email service double whose notify() succeeds by default."""
    service = AsyncMock(spec=EmailNotificationService)
    service.notify.return_value = True
    return service


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_approval_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "FRONTEND_URL": "http://localhost:3000",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret_key_with_enough_length"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.frontend_url = "http://localhost:3000"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("approval_backend.core.config.get_settings", return_value=mock), patch(
        "approval_backend.core.security.get_settings", return_value=mock
    ):
        yield mock
