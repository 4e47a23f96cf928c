from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .notification_provider import NotificationProvider
from .auth_provider import AuthProvider
from .admin_provider import AdminProvider
from .maintenance_provider import MaintenanceProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "NotificationProvider",
    "AuthProvider",
    "AdminProvider",
    "MaintenanceProvider",
]
