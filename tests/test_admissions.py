from datetime import date

import pytest

from schoolsite.application.services.admission_service import AdmissionNotFound, AdmissionService

from conftest import bearer

APPLICATION = {
    "firstName": "Ifeoma",
    "lastName": "Nwosu",
    "dateOfBirth": "2014-03-09",
    "gender": "female",
    "gradeLevel": "JSS1",
    "preferredStartDate": "2025-09-08",
    "previousSchool": "Sunrise Primary",
    "fatherName": "Emeka Nwosu",
    "guardianPhone": "+234 803 000 0000",
    "guardianEmail": "emeka@example.com",
    "heardAboutUs": "A friend",
}


@pytest.fixture
def admission_service(persistence):
    return AdmissionService(persistence)


def test_submit_starts_pending(admission_service):
    application = admission_service.submit(
        {"first_name": " Ifeoma ", "last_name": "Nwosu", "date_of_birth": date(2014, 3, 9), "gender": "", "status": "accepted"}
    )
    assert application.status == "pending"
    assert application.first_name == "Ifeoma"
    assert application.date_of_birth == date(2014, 3, 9)
    assert application.gender is None


def test_submit_requires_names(admission_service):
    with pytest.raises(ValueError, match="last name"):
        admission_service.submit({"first_name": "Ifeoma", "last_name": "  "})


def test_review_workflow(admission_service):
    application = admission_service.submit({"first_name": "A", "last_name": "B"})

    reviewed = admission_service.update(application.id, {"status": "reviewing", "special_needs": "None"})
    assert (reviewed.status, reviewed.special_needs) == ("reviewing", "None")
    assert [a.id for a in admission_service.list_applications("reviewing")] == [application.id]
    assert admission_service.list_applications("pending") == []

    with pytest.raises(ValueError):
        admission_service.update(application.id, {"status": "enrolled"})
    with pytest.raises(ValueError):
        admission_service.list_applications("enrolled")

    admission_service.delete(application.id)
    with pytest.raises(AdmissionNotFound):
        admission_service.delete(application.id)


def test_public_form_and_admin_review(client, make_admin):
    response = client.post("/api/admission", json=APPLICATION)
    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "pending"
    assert body["dateOfBirth"] == "2014-03-09"
    application_id = body["id"]

    make_admin()
    token = client.post(
        "/api/admin/login", json={"email": "head@school.example", "password": "s3cret-pass"}
    ).json()["token"]

    listing = client.get("/api/admin/admissions", headers=bearer(token)).json()
    assert listing["count"] == 1
    assert listing["items"][0]["guardianEmail"] == "emeka@example.com"

    updated = client.put(
        f"/api/admin/admissions/{application_id}", json={"status": "accepted"}, headers=bearer(token)
    )
    assert updated.json()["status"] == "accepted"
    assert updated.json()["firstName"] == "Ifeoma"
    assert client.get("/api/admin/admissions?status=accepted", headers=bearer(token)).json()["count"] == 1

    bad = client.put(f"/api/admin/admissions/{application_id}", json={"status": "maybe"}, headers=bearer(token))
    assert bad.status_code == 400

    deleted = client.delete(f"/api/admin/admissions/{application_id}", headers=bearer(token))
    assert deleted.json() == {"message": "Admission application deleted successfully"}
    missing = client.put(f"/api/admin/admissions/{application_id}", json={"status": "accepted"}, headers=bearer(token))
    assert missing.status_code == 404


def test_public_form_validates_payload(client):
    response = client.post("/api/admission", json={"firstName": "Only"})
    assert response.status_code == 422


def test_admission_form_is_closed_during_maintenance(client, container):
    container.site_settings_service.update_settings({"maintenance_mode": True})

    response = client.post("/api/admission", json=APPLICATION)
    assert response.status_code == 503
