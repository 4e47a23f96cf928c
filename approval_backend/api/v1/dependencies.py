# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...domain.constants import UserRole
from ...di.container import get_container


# Missing credentials are reported by get_current_user so the 401 carries our message
bearer_scheme = HTTPBearer(auto_error=False)

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers=BEARER_CHALLENGE,
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UserResponse:
    """
    Resolve the ``Authorization: Bearer <jwt>`` header to the stored account.

    Raises:
        HTTPException: 401 if the header is missing, the token is invalid, or
            the account no longer exists or is no longer approved
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authorized, no token")

    use_case = get_container().get(GetCurrentUserUseCase)
    try:
        return await use_case.execute(credentials.credentials)
    except ValueError as exception:
        raise _unauthorized(str(exception))


async def require_admin(
    current_user: UserResponse = Depends(get_current_user),
) -> UserResponse:
    """Dependency that only lets admin accounts through"""
    if current_user.role != UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )
    return current_user
