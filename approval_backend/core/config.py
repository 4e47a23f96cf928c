# Standard library imports
import os
from typing import Final, List, Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "cri_simulator")

        # JWT Configuration
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )

        # SMTP / Email Configuration
        self.smtp_host: Final[str] = os.getenv("SMTP_HOST", "smtp.gmail.com")
        self.smtp_port: Final[int] = int(os.getenv("SMTP_PORT", "587"))
        self.smtp_user: Final[str] = os.getenv("SMTP_USER", "")
        self.smtp_password: Final[str] = os.getenv("SMTP_PASSWORD", "")
        # Port 587 uses STARTTLS; set SMTP_USE_TLS=true only for implicit TLS (465)
        self.smtp_use_tls: Final[bool] = _env_bool("SMTP_USE_TLS", "false")
        self.email_from: Final[str] = os.getenv("EMAIL_FROM", self.smtp_user)
        self.email_from_name: Final[str] = os.getenv("EMAIL_FROM_NAME", "CRI Simulator")
        self.template_dir: Final[str] = os.getenv("EMAIL_TEMPLATE_DIR", "")

        # Frontend / CORS
        self.frontend_url: Final[str] = os.getenv("FRONTEND_URL", "http://localhost:3000")
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
