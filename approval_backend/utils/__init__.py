"""Utility modules for the account approval backend."""

from .email_service import EmailNotificationService, EmailSettings, render_template

__all__ = [
    "EmailNotificationService",
    "EmailSettings",
    "render_template",
]
