import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_SESSION_SECRET = "admin-secret-key"


class Settings:
    """Centralised application configuration sourced from environment variables."""

    def __init__(self) -> None:
        load_dotenv()
        self.environment = os.getenv("APP_ENV", "development").strip().lower()
        self.session_secret = self._resolve_session_secret()
        self.database_path = Path(os.getenv("DATABASE_PATH", "data/school.db")).resolve()
        self.admin_default_email = os.getenv("ADMIN_EMAIL")
        self.admin_default_password = os.getenv("ADMIN_PASSWORD")
        self.admin_signup_code = os.getenv("ADMIN_SIGNUP_CODE") or None
        self.frontend_base_url = os.getenv("FRONTEND_BASE_URL", "http://localhost:5000")
        self.smtp_host = os.getenv("SMTP_HOST", "")
        self.smtp_port = self._get_int("SMTP_PORT", default=587)
        self.smtp_username = os.getenv("SMTP_USERNAME", "")
        self.smtp_password = os.getenv("SMTP_PASSWORD", "")
        self.smtp_from_email = os.getenv("SMTP_FROM_EMAIL", "")
        self.contact_recipient = os.getenv("CONTACT_RECIPIENT") or None
        self.log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
        origins = os.getenv("CORS_ALLOW_ORIGINS")
        if origins:
            self.cors_allow_origins = [item.strip() for item in origins.split(",") if item.strip()]
        else:
            self.cors_allow_origins = ["*"]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def _resolve_session_secret(self) -> str:
        secret = os.getenv("SESSION_SECRET")
        if secret:
            return secret
        if self.is_production:
            raise RuntimeError("SESSION_SECRET must be set when APP_ENV=production")
        logger.warning(
            "SESSION_SECRET is not set; using the insecure development default. "
            "Configure a secret before deploying."
        )
        return DEFAULT_SESSION_SECRET

    @staticmethod
    def _get_int(key: str, default: Optional[int] = None) -> int:
        value = os.getenv(key)
        if value is None:
            if default is None:
                raise RuntimeError(f"Missing required environment variable: {key}")
            return default
        try:
            return int(value)
        except ValueError as exc:
            raise RuntimeError(f"Environment variable {key} must be an integer") from exc
