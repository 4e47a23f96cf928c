from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse, ApproverSummary
from .admin_dto import (
    DecisionResult,
    UserStatsResponse,
    UserListEnvelope,
    DecisionEnvelope,
    StatsEnvelope,
    MessageEnvelope,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "ApproverSummary",
    "DecisionResult",
    "UserStatsResponse",
    "UserListEnvelope",
    "DecisionEnvelope",
    "StatsEnvelope",
    "MessageEnvelope",
]
