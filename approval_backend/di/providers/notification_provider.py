from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...utils.email_service import EmailNotificationService, EmailSettings

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class NotificationProvider:
    """Email channel provider - builds the mail configuration once per process"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        email_settings = EmailSettings.from_settings(get_settings())
        container.register_singleton(EmailSettings, email_settings)
        container.register_singleton(
            EmailNotificationService,
            EmailNotificationService(email_settings=email_settings)
        )
