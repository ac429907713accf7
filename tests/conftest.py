"""
Shared pytest fixtures for the school site backend.

Unit-level fixtures build services around a temporary SQLite file; the
``client`` fixture runs the full FastAPI application (lifespan included)
against an isolated environment.
"""

import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from schoolsite.application.services.admin_auth_service import AdminAuthService  # noqa: E402
from schoolsite.core.app_factory import create_application  # noqa: E402
from schoolsite.core.config import Settings  # noqa: E402
from schoolsite.infrastructure.persistence.sqlite import SQLitePersistence  # noqa: E402
from schoolsite.services.password_hasher import PasswordHasher  # noqa: E402
from schoolsite.services.token_service import TokenService  # noqa: E402

TEST_SECRET = "test-session-secret"
SIGNUP_CODE = "SCHOOL-2024"

_ENV_KEYS = (
    "APP_ENV",
    "SESSION_SECRET",
    "DATABASE_PATH",
    "ADMIN_EMAIL",
    "ADMIN_PASSWORD",
    "ADMIN_SIGNUP_CODE",
    "FRONTEND_BASE_URL",
    "CORS_ALLOW_ORIGINS",
    "SMTP_HOST",
    "SMTP_PORT",
    "SMTP_USERNAME",
    "SMTP_PASSWORD",
    "SMTP_FROM_EMAIL",
    "CONTACT_RECIPIENT",
    "LOG_LEVEL",
)


class RecordingEmailService:
    """Stand-in for EmailService that records what would have been sent."""

    enabled = True

    def __init__(self):
        self.reset_emails = []
        self.contact_notifications = []

    def send_password_reset_email(self, to_email, reset_url):
        self.reset_emails.append((to_email, reset_url))
        return True

    def send_contact_notification(self, to_email, contact):
        self.contact_notifications.append((to_email, contact))
        return True


@pytest.fixture
def clean_env(monkeypatch, tmp_path: Path):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("SESSION_SECRET", TEST_SECRET)
    monkeypatch.setenv("DATABASE_PATH", str(tmp_path / "school.db"))
    monkeypatch.setenv("ADMIN_SIGNUP_CODE", SIGNUP_CODE)
    return monkeypatch


@pytest.fixture
def persistence(tmp_path: Path):
    store = SQLitePersistence(tmp_path / "unit.db")
    yield store
    store.close()


@pytest.fixture
def hasher() -> PasswordHasher:
    # Minimum bcrypt cost keeps unit tests fast; the default is covered separately.
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(secret_key=TEST_SECRET)


@pytest.fixture
def email_outbox() -> RecordingEmailService:
    return RecordingEmailService()


@pytest.fixture
def admin_service(persistence, hasher, tokens, email_outbox) -> AdminAuthService:
    return AdminAuthService(
        persistence=persistence,
        hasher=hasher,
        tokens=tokens,
        email_service=email_outbox,
        frontend_base_url="https://school.example",
        signup_code=SIGNUP_CODE,
    )


@pytest.fixture
def client(clean_env):
    app = create_application(Settings())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def container(client):
    return client.app.state.container


@pytest.fixture
def make_admin(container):
    """Create an administrator directly in the app's store; returns the stored record."""

    def _make(email="head@school.example", password="s3cret-pass", admin_id=None, role="admin"):
        return container.persistence.create_admin(
            email=email,
            password_hash=PasswordHasher(rounds=4).hash(password),
            first_name="Ada",
            last_name="Okafor",
            role=role,
            admin_id=admin_id,
        )

    return _make


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
