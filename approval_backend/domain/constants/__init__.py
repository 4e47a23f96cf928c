"""Constants for domain model field names"""

from .user_fields import UserFields, UserRole, UserStatus

__all__ = [
    "UserFields",
    "UserRole",
    "UserStatus",
]
