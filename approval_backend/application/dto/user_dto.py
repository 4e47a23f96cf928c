# Standard library imports
from datetime import datetime
from typing import Optional

# External package imports
from pydantic import BaseModel, EmailStr

# Local application imports
from ...domain.models.user import User


class ApproverSummary(BaseModel):
    """Name and email of the admin who decided an account"""
    id: str
    name: str
    email: EmailStr


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    email: EmailStr
    role: str
    status: str
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    approver: Optional[ApproverSummary] = None

    @classmethod
    def from_user(cls, user: User, approver: Optional[User] = None) -> "UserResponse":
        return cls(
            id=user.id or "",
            name=user.name,
            email=user.email,
            role=user.role,
            status=user.status,
            approved_by=user.approved_by,
            approved_at=user.approved_at,
            created_at=user.created_at,
            approver=(
                ApproverSummary(id=approver.id or "", name=approver.name, email=approver.email)
                if approver is not None
                else None
            ),
        )
