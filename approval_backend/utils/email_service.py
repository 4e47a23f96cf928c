"""
Email notification service (async).
====================================

Renders a named HTML template from ``templates/emails`` and sends it over SMTP
with aiosmtplib. Used after account decisions (approval / rejection) and for
the admin-triggered welcome email.

Sending never raises: every failure is logged and reported as ``False`` so a
mail outage cannot undo an account transition that is already persisted.
"""
import html
import logging
import re
from dataclasses import dataclass
from email.mime.text import MIMEText
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import aiosmtplib

from ..core.config import Settings
from ..domain.models.user import User

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "emails"

APPROVAL_TEMPLATE = "approval-email"
REJECTION_TEMPLATE = "rejection-email"
WELCOME_TEMPLATE = "welcome-email"
PASSWORD_RESET_TEMPLATE = "password-reset"

EMAIL_SUBJECTS: Dict[str, str] = {
    APPROVAL_TEMPLATE: "🎉 Your CRI Simulator Account is Approved!",
    REJECTION_TEMPLATE: "CRI Simulator Account Status Update",
    WELCOME_TEMPLATE: "👋 Welcome to Climate Readiness Index Simulator",
    PASSWORD_RESET_TEMPLATE: "🔐 Reset Your CRI Simulator Password",
}
DEFAULT_SUBJECT = "CRI Simulator Notification"

_PLACEHOLDER = re.compile(r"\{\{([^{}]+)\}\}")
_TEMPLATE_NAME = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass(frozen=True)
class EmailSettings:
    """SMTP channel and sender identity, built once per process and injected."""
    smtp_host: str
    smtp_port: int
    smtp_user: str
    smtp_password: str
    use_tls: bool
    from_address: str
    from_name: str
    frontend_url: str
    template_dir: Path = DEFAULT_TEMPLATE_DIR

    @classmethod
    def from_settings(cls, settings: Settings) -> "EmailSettings":
        return cls(
            smtp_host=settings.smtp_host,
            smtp_port=settings.smtp_port,
            smtp_user=settings.smtp_user,
            smtp_password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
            from_address=settings.email_from or settings.smtp_user,
            from_name=settings.email_from_name,
            frontend_url=settings.frontend_url,
            template_dir=Path(settings.template_dir) if settings.template_dir else DEFAULT_TEMPLATE_DIR,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.smtp_host and self.smtp_user and self.smtp_password and self.from_address)


def get_email_subject(template_name: str) -> str:
    """Subject line for a template; unknown templates get the generic subject."""
    return EMAIL_SUBJECTS.get(template_name, DEFAULT_SUBJECT)


def render_template(template: str, fields: Mapping[str, Any]) -> str:
    """
    Replace every ``{{key}}`` in `template` with ``str(fields[key])``.

    Placeholders without a field are left verbatim and fields without a
    placeholder are ignored. Substituted values are not scanned again.
    """
    def _substitute(match: "re.Match[str]") -> str:
        key = match.group(1)
        if key not in fields:
            return match.group(0)
        value = fields[key]
        return "" if value is None else str(value)

    return _PLACEHOLDER.sub(_substitute, template)


class EmailNotificationService:
    """Dispatches templated account emails through the configured SMTP channel."""

    def __init__(self, email_settings: EmailSettings) -> None:
        self.email_settings = email_settings

    def load_template(self, template_name: str) -> str:
        """
        Read ``<template_dir>/<template_name>.html``

        Raises:
            FileNotFoundError: If the name is malformed or no such template exists
        """
        if not _TEMPLATE_NAME.match(template_name or ""):
            raise FileNotFoundError(f"Invalid template name: {template_name!r}")
        path = self.email_settings.template_dir / f"{template_name}.html"
        return path.read_text(encoding="utf-8")

    def build_fields(self, user: User, extra_fields: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        fields: Dict[str, Any] = dict(extra_fields or {})
        # Built-in fields take precedence over caller-supplied ones; user text is HTML-escaped
        fields.update(
            name=html.escape(user.name),
            email=html.escape(user.email),
            frontendUrl=self.email_settings.frontend_url,
        )
        return fields

    def build_message(self, template_name: str, user: User, body: str) -> MIMEText:
        settings = self.email_settings
        message = MIMEText(body, "html", "utf-8")
        message["Subject"] = get_email_subject(template_name)
        message["From"] = f'"{settings.from_name}" <{settings.from_address}>'
        message["To"] = user.email
        return message

    async def notify(
        self,
        template_name: str,
        user: User,
        extra_fields: Optional[Mapping[str, Any]] = None,
    ) -> bool:
        """
        Render `template_name` for `user` and send it.

        Args:
            template_name: Template file name without extension (e.g. "approval-email")
            user: Recipient; name and email are substituted automatically
            extra_fields: Additional placeholder values

        Returns:
            True if the SMTP server accepted the message, False otherwise.
            Logs errors; does not raise.
        """
        settings = self.email_settings
        if not settings.is_configured:
            logger.warning(
                "SMTP not configured (set SMTP_HOST, SMTP_USER, SMTP_PASSWORD); skipping %s for %s",
                template_name,
                user.email,
            )
            return False

        try:
            body = render_template(self.load_template(template_name), self.build_fields(user, extra_fields))
            message = self.build_message(template_name, user, body)

            await aiosmtplib.send(
                message,
                sender=settings.from_address,
                recipients=[user.email],
                hostname=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.smtp_user,
                password=settings.smtp_password,
                use_tls=settings.use_tls,
            )
            logger.info("Email %s sent to %s", template_name, user.email)
            return True
        except Exception:
            logger.exception("Email sending failed for %s to %s", template_name, user.email)
            return False
