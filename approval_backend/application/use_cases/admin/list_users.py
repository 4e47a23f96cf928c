# Standard library imports
from typing import Dict, List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserRole
from ...dto.user_dto import UserResponse


class ListUsersUseCase:
    """Use case for listing all regular (non-admin) accounts with their deciding admin"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> List[UserResponse]:
        users = await self.user_repository.list_users(role=UserRole.USER)

        approver_ids = sorted({user.approved_by for user in users if user.approved_by})
        approvers: Dict[str, User] = {}
        if approver_ids:
            for approver in await self.user_repository.find_by_ids(approver_ids):
                approvers[approver.id or ""] = approver

        return [
            UserResponse.from_user(user, approver=approvers.get(user.approved_by or ""))
            for user in users
        ]
