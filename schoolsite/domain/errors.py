"""Rejections raised by the admin auth gate, rendered as ``{"message": ...}``."""

from typing import Optional

from fastapi import status


class AdminAuthError(Exception):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Admin authentication required"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingCredentialError(AdminAuthError):
    message = "Admin authentication required"


class InvalidTokenError(AdminAuthError):
    message = "Invalid admin token"


class InactiveAccountError(AdminAuthError):
    message = "Admin account not found or inactive"


class InternalAuthError(AdminAuthError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Admin authentication error"


class InvalidCredentialsError(AdminAuthError):
    message = "Invalid credentials"
