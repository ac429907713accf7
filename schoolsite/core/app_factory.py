from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings
from .container import ApplicationContainer
from .logging import configure_logging
from ..application.services.admin_auth_service import AdminAuthService
from ..application.services.admission_service import AdmissionService
from ..application.services.contact_service import ContactService
from ..application.services.news_service import NewsService
from ..application.services.site_settings_service import SiteSettingsService
from ..infrastructure.persistence.sqlite import SQLitePersistence
from ..presentation.api.errors import register_exception_handlers
from ..presentation.api.routers import admin as admin_router
from ..presentation.api.routers import admissions as admissions_router
from ..presentation.api.routers import contact as contact_router
from ..presentation.api.routers import news as news_router
from ..presentation.api.routers import settings as settings_router
from ..services.email_service import EmailService
from ..services.password_hasher import PasswordHasher
from ..services.token_service import TokenService

logger = logging.getLogger(__name__)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title="School Website API", lifespan=_create_lifespan(settings))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(admin_router.router)
    app.include_router(settings_router.router)
    app.include_router(contact_router.router)
    app.include_router(news_router.router)
    app.include_router(admissions_router.router)

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        return {"ok": True}

    return app


def build_container(settings: Settings) -> ApplicationContainer:
    persistence = SQLitePersistence(settings.database_path)
    password_hasher = PasswordHasher()
    token_service = TokenService(secret_key=settings.session_secret)
    email_service = EmailService(
        smtp_host=settings.smtp_host,
        smtp_port=settings.smtp_port,
        smtp_username=settings.smtp_username,
        smtp_password=settings.smtp_password,
        from_email=settings.smtp_from_email,
    )
    admin_auth_service = AdminAuthService(
        persistence=persistence,
        hasher=password_hasher,
        tokens=token_service,
        email_service=email_service,
        frontend_base_url=settings.frontend_base_url,
        signup_code=settings.admin_signup_code,
    )
    return ApplicationContainer(
        settings=settings,
        persistence=persistence,
        password_hasher=password_hasher,
        token_service=token_service,
        email_service=email_service,
        admin_auth_service=admin_auth_service,
        site_settings_service=SiteSettingsService(persistence),
        contact_service=ContactService(persistence, email_service, settings.contact_recipient),
        news_service=NewsService(persistence),
        admission_service=AdmissionService(persistence),
    )


def _create_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.log_level)
        container = build_container(settings)
        container.admin_auth_service.ensure_default_admin(
            settings.admin_default_email, settings.admin_default_password
        )
        if not container.email_service.enabled:
            logger.info("SMTP not configured; outgoing email is logged only")

        app.state.container = container  # type: ignore[attr-defined]

        try:
            yield
        finally:
            container.persistence.close()

    return lifespan
