from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ....application.services.admission_service import AdmissionNotFound, AdmissionService
from ....core.dependencies import get_admission_service
from ....domain.models import AdminPrincipal, AdmissionApplication
from ...api.dependencies import ensure_site_available, require_admin
from ...api.schemas.admission import AdmissionRequest, AdmissionUpdateRequest

router = APIRouter(tags=["Admissions"])


@router.post(
    "/api/admission",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_site_available)],
)
def submit_admission(
    payload: AdmissionRequest,
    admission_service: AdmissionService = Depends(get_admission_service),
) -> Dict[str, Any]:
    try:
        application = admission_service.submit(payload.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _serialize_application(application)


@router.get("/api/admin/admissions")
def list_admissions(
    status_filter: Optional[str] = Query(default=None, alias="status"),
    admission_service: AdmissionService = Depends(get_admission_service),
    _: AdminPrincipal = Depends(require_admin),
) -> Dict[str, Any]:
    try:
        applications = admission_service.list_applications(status_filter)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    items = [_serialize_application(item) for item in applications]
    return {"items": items, "count": len(items)}


@router.put("/api/admin/admissions/{application_id}")
def update_admission(
    application_id: int,
    payload: AdmissionUpdateRequest,
    admission_service: AdmissionService = Depends(get_admission_service),
    _: AdminPrincipal = Depends(require_admin),
) -> Dict[str, Any]:
    try:
        application = admission_service.update(application_id, payload.model_dump(exclude_unset=True))
    except AdmissionNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _serialize_application(application)


@router.delete("/api/admin/admissions/{application_id}")
def delete_admission(
    application_id: int,
    admission_service: AdmissionService = Depends(get_admission_service),
    _: AdminPrincipal = Depends(require_admin),
) -> Dict[str, Any]:
    try:
        admission_service.delete(application_id)
    except AdmissionNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return {"message": "Admission application deleted successfully"}


def _serialize_application(application: AdmissionApplication) -> Dict[str, Any]:
    return {
        "id": application.id,
        "firstName": application.first_name,
        "lastName": application.last_name,
        "dateOfBirth": _iso(application.date_of_birth),
        "gender": application.gender,
        "nationality": application.nationality,
        "address": application.address,
        "gradeLevel": application.grade_level,
        "preferredStartDate": _iso(application.preferred_start_date),
        "previousSchool": application.previous_school,
        "previousSchoolAddress": application.previous_school_address,
        "lastGradeCompleted": application.last_grade_completed,
        "fatherName": application.father_name,
        "motherName": application.mother_name,
        "fatherOccupation": application.father_occupation,
        "motherOccupation": application.mother_occupation,
        "guardianPhone": application.guardian_phone,
        "guardianEmail": application.guardian_email,
        "medicalConditions": application.medical_conditions,
        "specialNeeds": application.special_needs,
        "heardAboutUs": application.heard_about_us,
        "status": application.status,
        "createdAt": application.created_at.isoformat(),
        "updatedAt": application.updated_at.isoformat(),
    }


def _iso(value):
    return value.isoformat() if value else None
