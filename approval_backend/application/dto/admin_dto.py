# Standard library imports
from datetime import datetime
from typing import List, Optional

# External package imports
from pydantic import BaseModel, EmailStr

# Local application imports
from .user_dto import UserResponse


class DecisionResult(BaseModel):
    """Outcome of an approve/reject decision"""
    id: str
    name: str
    email: EmailStr
    status: str
    approved_at: Optional[datetime] = None
    email_sent: bool = False


class UserStatsResponse(BaseModel):
    """Counts over non-admin accounts; total = pending + approved + rejected"""
    total_users: int
    pending_users: int
    approved_users: int
    rejected_users: int


class UserListEnvelope(BaseModel):
    success: bool = True
    count: int
    data: List[UserResponse]


class DecisionEnvelope(BaseModel):
    success: bool = True
    message: str
    data: DecisionResult


class StatsEnvelope(BaseModel):
    success: bool = True
    data: UserStatsResponse


class MessageEnvelope(BaseModel):
    success: bool = True
    message: str
