from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...utils.email_service import EmailNotificationService
from ...application.use_cases.admin.decide_user import DecideUserUseCase
from ...application.use_cases.admin.list_users_by_status import ListUsersByStatusUseCase
from ...application.use_cases.admin.list_users import ListUsersUseCase
from ...application.use_cases.admin.get_user_stats import GetUserStatsUseCase
from ...application.use_cases.admin.send_welcome_email import SendWelcomeEmailUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AdminProvider:
    """Admin use case provider - approval decisions, listings and stats"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            DecideUserUseCase,
            lambda: DecideUserUseCase(
                user_repository=container.get(UserRepository),
                email_service=container.get(EmailNotificationService),
            )
        )

        container.register_factory(
            ListUsersByStatusUseCase,
            lambda: ListUsersByStatusUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            GetUserStatsUseCase,
            lambda: GetUserStatsUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            SendWelcomeEmailUseCase,
            lambda: SendWelcomeEmailUseCase(
                user_repository=container.get(UserRepository),
                email_service=container.get(EmailNotificationService),
            )
        )
