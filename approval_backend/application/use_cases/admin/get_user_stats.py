# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserRole, UserStatus
from ...dto.admin_dto import UserStatsResponse


class GetUserStatsUseCase:
    """Use case for the admin dashboard counters"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> UserStatsResponse:
        """
        Count regular accounts overall and per status

        Every count is restricted to the user role, so admins never skew the
        per-status buckets.
        """
        role = UserRole.USER
        return UserStatsResponse(
            total_users=await self.user_repository.count_users(role=role),
            pending_users=await self.user_repository.count_users(status=UserStatus.PENDING, role=role),
            approved_users=await self.user_repository.count_users(status=UserStatus.APPROVED, role=role),
            rejected_users=await self.user_repository.count_users(status=UserStatus.REJECTED, role=role),
        )
