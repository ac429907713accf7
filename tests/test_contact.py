import pytest
from fastapi.testclient import TestClient

from schoolsite.application.services.contact_service import ContactMessageNotFound, ContactService
from schoolsite.core.app_factory import create_application
from schoolsite.core.config import Settings
from schoolsite.services import email_service as email_module

from conftest import bearer

FORM = {
    "firstName": "Chidi",
    "lastName": "Anagonye",
    "email": "chidi@example.com",
    "phone": "+234 800 000 0000",
    "subject": "Admissions",
    "message": "When does the next term start?",
}


@pytest.fixture
def contact_service(persistence, email_outbox):
    return ContactService(persistence, email_outbox, recipient="office@school.example")


def test_submit_stores_and_relays(contact_service, email_outbox):
    contact = contact_service.submit(
        first_name=" Chidi ",
        last_name="Anagonye",
        email="chidi@example.com",
        subject="Admissions",
        message="Hello",
        phone="  ",
    )
    assert contact.status == "unread"
    assert contact.phone is None
    assert contact.full_name == "Chidi Anagonye"
    [(to_email, relayed)] = email_outbox.contact_notifications
    assert to_email == "office@school.example"
    assert relayed.id == contact.id


def test_submit_without_recipient_only_stores(persistence, email_outbox):
    service = ContactService(persistence, email_outbox, recipient=None)
    service.submit("A", "B", "a@b.com", "Hi", "Body")
    assert email_outbox.contact_notifications == []
    assert len(service.list_messages()) == 1


def test_submit_requires_fields(contact_service):
    with pytest.raises(ValueError, match="subject"):
        contact_service.submit("A", "B", "a@b.com", "   ", "Body")


def test_submit_rejects_line_breaks_in_header_fields(contact_service, email_outbox):
    with pytest.raises(ValueError, match="single line"):
        contact_service.submit("A", "B", "a@b.com", "Fees\r\nBcc: victim@evil.example", "Body")
    with pytest.raises(ValueError, match="single line"):
        contact_service.submit("A", "B", "a@b.com\nBcc: victim@evil.example", "Fees", "Body")
    assert contact_service.list_messages() == []
    assert email_outbox.contact_notifications == []


def test_status_update_and_delete(contact_service):
    contact = contact_service.submit("A", "B", "a@b.com", "Hi", "Body")

    assert contact_service.update_status(contact.id, "read").status == "read"
    with pytest.raises(ValueError):
        contact_service.update_status(contact.id, "spam")

    contact_service.delete(contact.id)
    assert contact_service.list_messages() == []
    with pytest.raises(ContactMessageNotFound):
        contact_service.delete(contact.id)


def test_public_contact_form_and_admin_inbox(client, make_admin):
    response = client.post("/api/contact", json=FORM)
    assert response.status_code == 201
    message_id = response.json()["id"]

    make_admin()
    token = client.post(
        "/api/admin/login", json={"email": "head@school.example", "password": "s3cret-pass"}
    ).json()["token"]

    inbox = client.get("/api/admin/contact-messages", headers=bearer(token)).json()
    assert inbox["count"] == 1
    assert inbox["items"][0]["subject"] == "Admissions"

    updated = client.patch(
        f"/api/admin/contact-messages/{message_id}", json={"status": "archived"}, headers=bearer(token)
    )
    assert updated.json()["status"] == "archived"

    deleted = client.delete(f"/api/admin/contact-messages/{message_id}", headers=bearer(token))
    assert deleted.json() == {"message": "Contact message deleted successfully"}
    missing = client.delete(f"/api/admin/contact-messages/{message_id}", headers=bearer(token))
    assert missing.status_code == 404


def test_contact_form_is_closed_during_maintenance(client, container):
    container.site_settings_service.update_settings({"maintenance_mode": True})

    response = client.post("/api/contact", json=FORM)
    assert response.status_code == 503
    assert response.json()["maintenanceMode"] is True


def test_contact_form_rejects_header_injection(clean_env, monkeypatch):
    sent = []

    class RecordingSMTP:
        def __init__(self, host, port):
            pass

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

        def starttls(self):
            pass

        def login(self, username, password):
            pass

        def send_message(self, msg):
            sent.append(msg)

    monkeypatch.setattr(email_module.smtplib, "SMTP", RecordingSMTP)
    clean_env.setenv("SMTP_HOST", "smtp.example.com")
    clean_env.setenv("SMTP_USERNAME", "mailer@school.example")
    clean_env.setenv("CONTACT_RECIPIENT", "office@school.example")

    with TestClient(create_application(Settings())) as client:
        rejected = client.post("/api/contact", json={**FORM, "subject": "Fees\r\nBcc: victim@evil.example"})
        assert rejected.status_code == 400
        assert rejected.json() == {"message": "Subject and email must be a single line"}
        assert sent == []

        accepted = client.post("/api/contact", json=FORM)
        assert accepted.status_code == 201
        [msg] = sent
        assert msg["Subject"] == "Contact Form: Admissions"
        assert msg["Bcc"] is None
