from __future__ import annotations

import logging
from typing import Optional, Tuple
from urllib.parse import urlencode

from ...domain.errors import (
    InactiveAccountError,
    InternalAuthError,
    InvalidCredentialsError,
    InvalidTokenError,
)
from ...domain.models import AdminPrincipal, SessionClaims
from ...domain.ports.persistence import AdministratorRepository
from ...services.email_service import EmailService
from ...services.password_hasher import PasswordHasher
from ...services.token_service import TokenService

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class RegistrationDisabledError(Exception):
    pass


class AdminAuthService:
    """Manages administrator accounts and token-based authentication."""

    def __init__(
        self,
        persistence: AdministratorRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
        email_service: Optional[EmailService] = None,
        frontend_base_url: str = "http://localhost:5000",
        signup_code: Optional[str] = None,
    ) -> None:
        self._persistence = persistence
        self._hasher = hasher
        self._tokens = tokens
        self._email = email_service
        self._frontend_base_url = frontend_base_url.rstrip("/")
        self._signup_code = signup_code

    # ------------------------------------------------------------------
    def ensure_default_admin(self, email: Optional[str], password: Optional[str]) -> Optional[AdminPrincipal]:
        if not email or not password:
            return None
        existing = self._persistence.get_admin_by_email(email.strip().lower())
        if existing:
            return AdminPrincipal.from_administrator(existing)
        logger.info("Creating default administrator account for %s", email)
        admin = self._persistence.create_admin(
            email=email.strip().lower(),
            password_hash=self._hasher.hash(password),
        )
        return AdminPrincipal.from_administrator(admin)

    def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        admin_code: str,
    ) -> AdminPrincipal:
        if not self._signup_code:
            raise RegistrationDisabledError("Admin registration is disabled.")
        if admin_code != self._signup_code:
            raise ValueError("Invalid admin code")
        email_clean = email.strip().lower()
        if not email_clean:
            raise ValueError("Email is required")
        self._check_password(password)
        if self._persistence.get_admin_by_email(email_clean):
            raise ValueError("Admin user already exists with this email")
        admin = self._persistence.create_admin(
            email=email_clean,
            password_hash=self._hasher.hash(password),
            first_name=first_name.strip(),
            last_name=last_name.strip(),
        )
        logger.info("Registered administrator %s", admin.id)
        return AdminPrincipal.from_administrator(admin)

    def authenticate(self, email: str, password: str) -> Tuple[str, AdminPrincipal]:
        admin = self._persistence.get_admin_by_email(email.strip().lower())
        if not admin or not admin.is_active:
            raise InvalidCredentialsError()
        try:
            matches = self._hasher.verify(password, admin.password_hash)
        except ValueError:
            logger.warning("Stored password hash for administrator %s is unreadable", admin.id)
            raise InvalidCredentialsError() from None
        if not matches:
            logger.info("Failed login for administrator %s", admin.id)
            raise InvalidCredentialsError()
        principal = AdminPrincipal.from_administrator(admin)
        token = self._tokens.issue_session_token(
            SessionClaims(subject_id=admin.id, email=admin.email, role=admin.role)
        )
        return token, principal

    def resolve_admin(self, token: str) -> AdminPrincipal:
        """Verify a bearer token and re-check that its administrator is still active."""
        claims = self._tokens.verify_session_token(token)
        if claims is None:
            raise InvalidTokenError()
        try:
            admin = self._persistence.get_admin_by_id(claims.subject_id)
        except Exception as exc:
            logger.exception("Administrator lookup failed during authentication")
            raise InternalAuthError() from exc
        if admin is None or not admin.is_active:
            logger.warning("Token presented for missing or inactive administrator %s", claims.subject_id)
            raise InactiveAccountError()
        return AdminPrincipal.from_administrator(admin)

    # Password reset ------------------------------------------------------
    def request_password_reset(self, email: str) -> Optional[str]:
        admin = self._persistence.get_admin_by_email(email.strip().lower())
        if not admin or not admin.is_active:
            logger.info("Password reset requested for unknown or inactive account")
            return None
        token = self._tokens.issue_reset_token(admin.id)
        if self._email is not None:
            reset_url = f"{self._frontend_base_url}/admin/reset-password?{urlencode({'token': token})}"
            self._email.send_password_reset_email(admin.email, reset_url)
        return token

    def confirm_password_reset(self, token: str, new_password: str) -> AdminPrincipal:
        if not self._tokens.verify_reset_token(token):
            raise ValueError("Invalid or expired reset token")
        admin_id = self._tokens.reset_subject(token)
        admin = self._persistence.get_admin_by_id(admin_id) if admin_id else None
        if admin is None or not admin.is_active:
            raise ValueError("Invalid or expired reset token")
        self._check_password(new_password)
        updated = self._persistence.update_admin_password(admin.id, self._hasher.hash(new_password))
        logger.info("Password reset completed for administrator %s", admin.id)
        return AdminPrincipal.from_administrator(updated)

    @staticmethod
    def _check_password(password: str) -> None:
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
