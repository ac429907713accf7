"""HTTP-level behaviour of the admin auth gate on protected routes."""

import sqlite3
from datetime import timedelta

from schoolsite.domain.models import SessionClaims
from schoolsite.services.token_service import TokenService

from conftest import TEST_SECRET, bearer

PROFILE = "/api/admin/profile"


def test_missing_header_is_rejected(client):
    response = client.get(PROFILE)
    assert response.status_code == 401
    assert response.json() == {"message": "Admin authentication required"}


def test_non_bearer_scheme_is_rejected(client):
    response = client.get(PROFILE, headers={"Authorization": "Basic dXNlcjpwYXNz"})
    assert response.status_code == 401
    assert response.json() == {"message": "Admin authentication required"}


def test_garbage_token_is_rejected(client):
    response = client.get(PROFILE, headers=bearer("not-a-real-token"))
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid admin token"}


def test_expired_token_is_rejected(client, make_admin):
    admin = make_admin(admin_id="a1", email="x@y.com")
    stale = TokenService(TEST_SECRET, session_ttl=timedelta(seconds=-1))
    token = stale.issue_session_token(SessionClaims(admin.id, admin.email, admin.role))

    response = client.get(PROFILE, headers=bearer(token))
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid admin token"}


def test_reset_token_cannot_open_admin_routes(client, container, make_admin):
    make_admin(admin_id="a1", email="x@y.com")
    token = container.token_service.issue_reset_token("a1")

    response = client.get(PROFILE, headers=bearer(token))
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid admin token"}


def test_valid_token_exposes_resolved_identity(client, container, make_admin):
    make_admin(admin_id="a1", email="x@y.com", role="admin")
    token = container.token_service.issue_session_token(SessionClaims("a1", "x@y.com", "admin"))

    response = client.get(PROFILE, headers=bearer(token))
    assert response.status_code == 200
    body = response.json()
    assert (body["id"], body["email"], body["role"]) == ("a1", "x@y.com", "admin")
    assert "password_hash" not in body and "passwordHash" not in body


def test_deactivated_account_token_is_replayed_and_rejected(client, container, make_admin):
    make_admin(admin_id="a1", email="x@y.com")
    token = container.token_service.issue_session_token(SessionClaims("a1", "x@y.com", "admin"))
    assert client.get(PROFILE, headers=bearer(token)).status_code == 200

    container.persistence.set_admin_active("a1", False)

    response = client.get(PROFILE, headers=bearer(token))
    assert response.status_code == 401
    assert response.json() == {"message": "Admin account not found or inactive"}


def test_token_for_unknown_account_is_rejected(client, container):
    token = container.token_service.issue_session_token(SessionClaims("ghost", "g@y.com", "admin"))
    response = client.get(PROFILE, headers=bearer(token))
    assert response.status_code == 401
    assert response.json() == {"message": "Admin account not found or inactive"}


def test_datastore_failure_surfaces_as_500(client, container, monkeypatch):
    def broken_lookup(admin_id):
        raise sqlite3.OperationalError("disk I/O error")

    monkeypatch.setattr(container.persistence, "get_admin_by_id", broken_lookup)
    token = container.token_service.issue_session_token(SessionClaims("a1", "x@y.com", "admin"))

    response = client.get(PROFILE, headers=bearer(token))
    assert response.status_code == 500
    assert response.json() == {"message": "Admin authentication error"}


def test_every_admin_panel_route_is_gated(client):
    requests = [
        ("get", "/api/admin/profile"),
        ("post", "/api/admin/logout"),
        ("get", "/api/admin/settings"),
        ("put", "/api/admin/settings"),
        ("get", "/api/admin/contact-messages"),
        ("patch", "/api/admin/contact-messages/1"),
        ("delete", "/api/admin/contact-messages/1"),
        ("get", "/api/admin/news"),
        ("post", "/api/admin/news"),
        ("put", "/api/admin/news/1"),
        ("delete", "/api/admin/news/1"),
        ("get", "/api/admin/admissions"),
        ("put", "/api/admin/admissions/1"),
        ("delete", "/api/admin/admissions/1"),
    ]
    for method, path in requests:
        response = getattr(client, method)(path)
        assert response.status_code == 401, path
        assert response.json() == {"message": "Admin authentication required"}, path
