from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: List[str]) -> List[User]:
        """Find all users whose ID is in `user_ids`"""
        pass

    @abstractmethod
    async def find_first_admin(self) -> Optional[User]:
        """Find any user with the admin role"""
        pass

    @abstractmethod
    async def list_users(
        self,
        status: Optional[str] = None,
        role: Optional[str] = None,
    ) -> List[User]:
        """List users matching the given filters, newest first"""
        pass

    @abstractmethod
    async def count_users(
        self,
        status: Optional[str] = None,
        role: Optional[str] = None,
    ) -> int:
        """Count users matching the given filters"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update)"""
        pass

    @abstractmethod
    async def apply_decision(
        self,
        user_id: str,
        status: str,
        decided_by: str,
        decided_at: datetime,
    ) -> Optional[User]:
        """
        Move a pending user to `status` in a single conditional update.

        Returns the updated user, or None when no pending user with that ID
        exists (missing, or already decided by a concurrent call).
        """
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every user. Returns the number of deleted records."""
        pass
