# Standard library imports
import logging
from dataclasses import dataclass

# External package imports
from pydantic import ValidationError

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserRole, UserStatus
from ....domain.exceptions import InvalidAccountDetailsError
from ....core.security import hash_password
from ....utils.datetime_utils import utc_now
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.validation import describe_validation_errors

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_NAME = "Admin User"
DEFAULT_ADMIN_EMAIL = "admin@example.com"
DEFAULT_ADMIN_PASSWORD = "admin123"


@dataclass
class CreateAdminResult:
    user: User
    created: bool


def _validated_details(name: str, email: str, password: str) -> UserRegistrationRequest:
    """Apply the registration rules so the admin can log in through the API"""
    try:
        return UserRegistrationRequest(name=name, email=email, password=password)
    except ValidationError as exc:
        problems = describe_validation_errors(exc.errors())
        raise InvalidAccountDetailsError(f"Invalid admin details ({problems})") from exc


class CreateAdminUseCase:
    """Use case for bootstrapping the admin account when none exists"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(
        self,
        name: str = DEFAULT_ADMIN_NAME,
        email: str = DEFAULT_ADMIN_EMAIL,
        password: str = DEFAULT_ADMIN_PASSWORD,
    ) -> CreateAdminResult:
        """
        Create an approved admin unless any admin already exists

        Returns:
            CreateAdminResult with the existing or new admin and whether it was created

        Raises:
            InvalidAccountDetailsError: If name, email or password would be
                rejected by registration
        """
        existing = await self.user_repository.find_first_admin()
        if existing is not None:
            return CreateAdminResult(user=existing, created=False)

        details = _validated_details(name, email, password)
        admin = await self.user_repository.save(
            User(
                id=None,
                name=details.name.strip(),
                email=str(details.email).strip().lower(),
                hashed_password=hash_password(details.password),
                role=UserRole.ADMIN,
                status=UserStatus.APPROVED,
                created_at=utc_now(),
            )
        )
        logger.info("Admin user created: %s", admin.email)
        return CreateAdminResult(user=admin, created=True)
