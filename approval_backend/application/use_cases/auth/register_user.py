# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserRole, UserStatus
from ....domain.exceptions import DuplicateEmailError
from ....core.security import hash_password
from ....utils.datetime_utils import utc_now
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user; accounts start out pending"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with created user information

        Raises:
            DuplicateEmailError: If user with email already exists
        """
        email = str(request.email).strip().lower()

        existing_user = await self.user_repository.find_by_email(email)
        if existing_user is not None:
            raise DuplicateEmailError(email)

        new_user = User(
            id=None,  # Will be set by repository
            name=request.name.strip(),
            email=email,
            hashed_password=hash_password(request.password),
            role=UserRole.USER,
            status=UserStatus.PENDING,
            created_at=utc_now(),
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info("Registered user %s (%s), awaiting approval", saved_user.id, saved_user.email)

        return UserResponse.from_user(saved_user)
