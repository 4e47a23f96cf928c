from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


AUTH_USE_CASES = (RegisterUserUseCase, LoginUserUseCase, GetCurrentUserUseCase)


class AuthProvider:
    """Registration, login and token resolution; each needs only the user store"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        for use_case_cls in AUTH_USE_CASES:
            container.register_factory(
                use_case_cls,
                lambda cls=use_case_cls: cls(user_repository=container.get(UserRepository))
            )
