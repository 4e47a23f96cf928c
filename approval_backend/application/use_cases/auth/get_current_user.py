# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserStatus
from ....core.security import decode_jwt_token
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Resolves a bearer token to the stored account it was issued for"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    @staticmethod
    def subject_of(token: str) -> str:
        """User id carried in the token's ``sub`` claim"""
        try:
            claims = decode_jwt_token(token)
        except ValueError as exception:
            raise ValueError(f"Invalid or expired token: {exception}") from exception

        subject = claims.get("sub")
        if not subject:
            raise ValueError("Invalid authentication payload: missing user ID")
        return subject

    async def execute(self, token: str) -> UserResponse:
        """
        Load the account behind `token`.

        Role and status are read from the store rather than the token claims,
        so an account whose access was withdrawn stops authenticating at once.

        Raises:
            ValueError: If the token is invalid, the user is gone, or a
                non-admin account is no longer approved
        """
        user = await self.user_repository.find_by_id(self.subject_of(token))
        if user is None:
            raise ValueError("User not found")

        if not user.is_admin and user.status != UserStatus.APPROVED:
            raise ValueError(f"Account is {user.status}")

        return UserResponse.from_user(user)
