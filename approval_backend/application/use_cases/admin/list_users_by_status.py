# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserStatus
from ...dto.user_dto import UserResponse


class ListUsersByStatusUseCase:
    """Use case for listing accounts in one status (e.g. the pending queue)"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, status: str = UserStatus.PENDING) -> List[UserResponse]:
        """
        List users with `status`, newest first

        Raises:
            ValueError: If `status` is not a known status
        """
        if status not in UserStatus.ALL:
            raise ValueError(f"Invalid status: {status}")

        users = await self.user_repository.list_users(status=status)
        return [UserResponse.from_user(user) for user in users]
