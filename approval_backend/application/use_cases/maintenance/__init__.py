from .create_admin import CreateAdminUseCase, CreateAdminResult
from .seed_test_users import SeedTestUsersUseCase
from .clear_users import ClearUsersUseCase

__all__ = [
    "CreateAdminUseCase",
    "CreateAdminResult",
    "SeedTestUsersUseCase",
    "ClearUsersUseCase",
]
