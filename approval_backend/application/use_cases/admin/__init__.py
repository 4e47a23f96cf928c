from .decide_user import DecideUserUseCase
from .list_users_by_status import ListUsersByStatusUseCase
from .list_users import ListUsersUseCase
from .get_user_stats import GetUserStatsUseCase
from .send_welcome_email import SendWelcomeEmailUseCase

__all__ = [
    "DecideUserUseCase",
    "ListUsersByStatusUseCase",
    "ListUsersUseCase",
    "GetUserStatsUseCase",
    "SendWelcomeEmailUseCase",
]
