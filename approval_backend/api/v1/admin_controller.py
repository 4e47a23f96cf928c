# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.admin_dto import (
    DecisionEnvelope,
    MessageEnvelope,
    StatsEnvelope,
    UserListEnvelope,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.admin.decide_user import DecideUserUseCase
from ...application.use_cases.admin.list_users_by_status import ListUsersByStatusUseCase
from ...application.use_cases.admin.list_users import ListUsersUseCase
from ...application.use_cases.admin.get_user_stats import GetUserStatsUseCase
from ...application.use_cases.admin.send_welcome_email import SendWelcomeEmailUseCase
from ...domain.constants import UserStatus
from ...domain.exceptions import (
    AccountError,
    InvalidUserStateError,
    UserNotFoundError,
)
from ...di.container import get_container
from .dependencies import require_admin

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"], dependencies=[Depends(require_admin)])


def _to_http_exception(exception: AccountError) -> HTTPException:
    """NotFound -> 404, InvalidState -> 400, anything else -> generic 500"""
    if isinstance(exception, UserNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exception.message)
    if isinstance(exception, InvalidUserStateError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exception.message)
    logger.error("Admin operation failed: %s", exception.message)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")


@router.get("/pending-users", response_model=UserListEnvelope)
async def get_pending_users() -> UserListEnvelope:
    """
    List all pending user requests, newest first

    Returns:
        UserListEnvelope with count and users
    """
    use_case = get_container().get(ListUsersByStatusUseCase)
    try:
        users = await use_case.execute(UserStatus.PENDING)
    except AccountError as exception:
        raise _to_http_exception(exception)
    return UserListEnvelope(count=len(users), data=users)


@router.get("/users", response_model=UserListEnvelope)
async def get_all_users() -> UserListEnvelope:
    """List all regular users with their status and deciding admin"""
    use_case = get_container().get(ListUsersUseCase)
    try:
        users = await use_case.execute()
    except AccountError as exception:
        raise _to_http_exception(exception)
    return UserListEnvelope(count=len(users), data=users)


@router.put("/approve-user/{user_id}", response_model=DecisionEnvelope)
async def approve_user(
    user_id: str,
    current_user: UserResponse = Depends(require_admin),
) -> DecisionEnvelope:
    """
    Approve a pending user and send the approval email

    Args:
        user_id: ID of the user to approve
        current_user: Deciding admin (from dependency)
    """
    use_case = get_container().get(DecideUserUseCase)
    try:
        result = await use_case.approve(user_id=user_id, admin_id=current_user.id)
    except AccountError as exception:
        raise _to_http_exception(exception)
    return DecisionEnvelope(message="User approved successfully", data=result)


@router.put("/reject-user/{user_id}", response_model=DecisionEnvelope)
async def reject_user(
    user_id: str,
    current_user: UserResponse = Depends(require_admin),
) -> DecisionEnvelope:
    """
    Reject a pending user and send the rejection email

    Args:
        user_id: ID of the user to reject
        current_user: Deciding admin (from dependency)
    """
    use_case = get_container().get(DecideUserUseCase)
    try:
        result = await use_case.reject(user_id=user_id, admin_id=current_user.id)
    except AccountError as exception:
        raise _to_http_exception(exception)
    return DecisionEnvelope(message="User rejected successfully", data=result)


@router.get("/stats", response_model=StatsEnvelope)
async def get_dashboard_stats() -> StatsEnvelope:
    """Counts of regular users overall and per status"""
    use_case = get_container().get(GetUserStatsUseCase)
    try:
        stats = await use_case.execute()
    except AccountError as exception:
        raise _to_http_exception(exception)
    return StatsEnvelope(data=stats)


@router.post("/send-welcome/{user_id}", response_model=MessageEnvelope)
async def send_welcome_email(user_id: str) -> MessageEnvelope:
    """Send the welcome email to an existing user"""
    use_case = get_container().get(SendWelcomeEmailUseCase)
    try:
        email_sent = await use_case.execute(user_id)
    except AccountError as exception:
        raise _to_http_exception(exception)

    if not email_sent:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send welcome email"
        )
    return MessageEnvelope(message="Welcome email sent successfully")
