from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ...application.services.admin_auth_service import AdminAuthService
from ...application.services.site_settings_service import SiteSettingsService
from ...core.dependencies import get_admin_auth_service, get_site_settings_service
from ...domain.errors import MissingCredentialError
from ...domain.models import AdminPrincipal
from .errors import MaintenanceModeError

_bearer_scheme = HTTPBearer(auto_error=False)


def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    admin_service: AdminAuthService = Depends(get_admin_auth_service),
) -> AdminPrincipal:
    """Gate for protected routes; the returned principal is the handler's identity."""
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise MissingCredentialError()
    return admin_service.resolve_admin(credentials.credentials)


def ensure_site_available(
    site_settings: SiteSettingsService = Depends(get_site_settings_service),
) -> None:
    if site_settings.is_maintenance_mode():
        raise MaintenanceModeError()
