from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .admin import (
    DecideUserUseCase,
    ListUsersByStatusUseCase,
    ListUsersUseCase,
    GetUserStatsUseCase,
    SendWelcomeEmailUseCase,
)
from .maintenance import (
    CreateAdminUseCase,
    SeedTestUsersUseCase,
    ClearUsersUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "DecideUserUseCase",
    "ListUsersByStatusUseCase",
    "ListUsersUseCase",
    "GetUserStatsUseCase",
    "SendWelcomeEmailUseCase",
    "CreateAdminUseCase",
    "SeedTestUsersUseCase",
    "ClearUsersUseCase",
]
