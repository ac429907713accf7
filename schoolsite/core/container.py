from dataclasses import dataclass

from ..application.services.admin_auth_service import AdminAuthService
from ..application.services.admission_service import AdmissionService
from ..application.services.contact_service import ContactService
from ..application.services.news_service import NewsService
from ..application.services.site_settings_service import SiteSettingsService
from .config import Settings
from ..domain.ports.persistence import PersistenceGateway
from ..services.email_service import EmailService
from ..services.password_hasher import PasswordHasher
from ..services.token_service import TokenService


@dataclass(slots=True)
class ApplicationContainer:
    """Dependency registry shared across the FastAPI application lifecycle."""

    settings: Settings
    persistence: PersistenceGateway
    password_hasher: PasswordHasher
    token_service: TokenService
    email_service: EmailService
    admin_auth_service: AdminAuthService
    site_settings_service: SiteSettingsService
    contact_service: ContactService
    news_service: NewsService
    admission_service: AdmissionService
