from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from ....application.services.contact_service import ContactMessageNotFound, ContactService
from ....core.dependencies import get_contact_service
from ....domain.models import AdminPrincipal, ContactMessage
from ...api.dependencies import ensure_site_available, require_admin
from ...api.schemas.contact import ContactRequest, ContactStatusUpdate

router = APIRouter(tags=["Contact Messages"])


@router.post(
    "/api/contact",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(ensure_site_available)],
)
def submit_contact(
    payload: ContactRequest,
    contact_service: ContactService = Depends(get_contact_service),
) -> Dict[str, Any]:
    try:
        contact = contact_service.submit(
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            phone=payload.phone,
            subject=payload.subject,
            message=payload.message,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _serialize_contact(contact)


@router.get("/api/admin/contact-messages")
def list_contact_messages(
    contact_service: ContactService = Depends(get_contact_service),
    _: AdminPrincipal = Depends(require_admin),
) -> Dict[str, Any]:
    items = [_serialize_contact(item) for item in contact_service.list_messages()]
    return {"items": items, "count": len(items)}


@router.patch("/api/admin/contact-messages/{message_id}")
def update_contact_message(
    message_id: int,
    payload: ContactStatusUpdate,
    contact_service: ContactService = Depends(get_contact_service),
    _: AdminPrincipal = Depends(require_admin),
) -> Dict[str, Any]:
    try:
        contact = contact_service.update_status(message_id, payload.status)
    except ContactMessageNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _serialize_contact(contact)


@router.delete("/api/admin/contact-messages/{message_id}")
def delete_contact_message(
    message_id: int,
    contact_service: ContactService = Depends(get_contact_service),
    _: AdminPrincipal = Depends(require_admin),
) -> Dict[str, Any]:
    try:
        contact_service.delete(message_id)
    except ContactMessageNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return {"message": "Contact message deleted successfully"}


def _serialize_contact(contact: ContactMessage) -> Dict[str, Any]:
    return {
        "id": contact.id,
        "firstName": contact.first_name,
        "lastName": contact.last_name,
        "email": contact.email,
        "phone": contact.phone,
        "subject": contact.subject,
        "message": contact.message,
        "status": contact.status,
        "createdAt": contact.created_at.isoformat(),
        "updatedAt": contact.updated_at.isoformat(),
    }
