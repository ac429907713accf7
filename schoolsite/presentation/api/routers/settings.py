from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from ....application.services.site_settings_service import SiteSettingsService
from ....core.dependencies import get_site_settings_service
from ....domain.models import AdminPrincipal
from ...api.dependencies import require_admin
from ...api.schemas.settings import SettingsUpdateRequest

router = APIRouter(tags=["Site Settings"])


@router.get("/api/settings/public")
def public_settings(
    site_settings: SiteSettingsService = Depends(get_site_settings_service),
) -> Dict[str, Any]:
    return site_settings.public_settings()


@router.get("/api/admin/settings")
def list_site_settings(
    site_settings: SiteSettingsService = Depends(get_site_settings_service),
    _: AdminPrincipal = Depends(require_admin),
) -> Dict[str, Any]:
    return {"settings": site_settings.list_settings()}


@router.put("/api/admin/settings")
def update_site_settings(
    payload: SettingsUpdateRequest,
    site_settings: SiteSettingsService = Depends(get_site_settings_service),
    _: AdminPrincipal = Depends(require_admin),
) -> Dict[str, Any]:
    try:
        settings = site_settings.update_settings(payload.settings)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return {"message": "Settings updated", "settings": settings}
