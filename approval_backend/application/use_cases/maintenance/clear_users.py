# Local application imports
from ....domain.repositories.user_repository import UserRepository


class ClearUsersUseCase:
    """Use case for wiping every user record (maintenance only)"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> int:
        return await self.user_repository.delete_all()
