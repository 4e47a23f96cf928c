# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields, UserStatus
from ....domain.exceptions import AccountNotApprovedError
from ....core.security import verify_password, create_jwt_token
from ...dto.auth_dto import UserLoginRequest, TokenResponse


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> Optional[TokenResponse]:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            TokenResponse if authentication successful, None for bad credentials

        Raises:
            AccountNotApprovedError: If the credentials are valid but the
                account has not been approved
        """
        user = await self.user_repository.find_by_email(str(request.email))
        if user is None:
            return None

        if not verify_password(request.password, user.hashed_password):
            return None

        if not user.is_admin and user.status != UserStatus.APPROVED:
            raise AccountNotApprovedError(user.status)

        token = create_jwt_token({
            "sub": user.id or "",  # JWT standard claim (subject)
            UserFields.EMAIL: user.email,
            UserFields.ROLE: user.role,
        })

        return TokenResponse(access_token=token)
