# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Local application imports
from ..constants import UserRole, UserStatus


@dataclass
class User:
    """
    Pure domain model for User entity - no external dependencies.

    `approved_by` / `approved_at` record the admin decision and are filled
    for both approved and rejected accounts.
    """
    id: Optional[str]
    name: str
    email: str
    hashed_password: str
    role: str = UserRole.USER
    status: str = UserStatus.PENDING
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.name or len(self.name.strip()) < 2:
            raise ValueError("Name must be at least 2 characters")
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
        if self.role not in UserRole.ALL:
            raise ValueError(f"Invalid role: {self.role}")
        if self.status not in UserStatus.ALL:
            raise ValueError(f"Invalid status: {self.status}")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_pending(self) -> bool:
        return self.status == UserStatus.PENDING
