# Standard library imports
import logging
from typing import Dict, List, Tuple

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserRole, UserStatus
from ....core.security import hash_password
from ....utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)

TEST_USERS: List[Dict[str, str]] = [
    {"name": "John Doe", "email": "john@example.com", "status": UserStatus.PENDING},
    {"name": "Jane Smith", "email": "jane@example.com", "status": UserStatus.APPROVED},
    {"name": "Bob Johnson", "email": "bob@example.com", "status": UserStatus.REJECTED},
]
TEST_PASSWORD = "password123"


class SeedTestUsersUseCase:
    """Use case for seeding one account per status; existing emails are skipped"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> Tuple[List[str], List[str]]:
        """
        Returns:
            (created emails, skipped emails)
        """
        created: List[str] = []
        skipped: List[str] = []

        for entry in TEST_USERS:
            if await self.user_repository.find_by_email(entry["email"]) is not None:
                skipped.append(entry["email"])
                continue

            await self.user_repository.save(
                User(
                    id=None,
                    name=entry["name"],
                    email=entry["email"],
                    hashed_password=hash_password(TEST_PASSWORD),
                    role=UserRole.USER,
                    status=entry["status"],
                    created_at=utc_now(),
                )
            )
            created.append(entry["email"])

        logger.info("Test users seeded: %d created, %d skipped", len(created), len(skipped))
        return created, skipped
