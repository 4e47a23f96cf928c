# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ....utils.email_service import WELCOME_TEMPLATE, EmailNotificationService


class SendWelcomeEmailUseCase:
    """Use case for an admin (re)sending the welcome email to a user"""

    def __init__(
        self,
        user_repository: UserRepository,
        email_service: EmailNotificationService,
    ) -> None:
        self.user_repository = user_repository
        self.email_service = email_service

    async def execute(self, user_id: str) -> bool:
        """
        Returns:
            True if the email was sent

        Raises:
            UserNotFoundError: If no user has this ID
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        return await self.email_service.notify(WELCOME_TEMPLATE, user)
