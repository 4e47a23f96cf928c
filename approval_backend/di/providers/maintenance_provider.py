from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.maintenance.create_admin import CreateAdminUseCase
from ...application.use_cases.maintenance.seed_test_users import SeedTestUsersUseCase
from ...application.use_cases.maintenance.clear_users import ClearUsersUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MaintenanceProvider:
    """Maintenance use cases used by the command-line scripts"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case_cls in (CreateAdminUseCase, SeedTestUsersUseCase, ClearUsersUseCase):
            container.register_factory(
                use_case_cls,
                lambda cls=use_case_cls: cls(user_repository=container.get(UserRepository))
            )
