from fastapi import APIRouter, Depends, HTTPException, Response, status

from ....application.services.admin_auth_service import AdminAuthService, RegistrationDisabledError
from ....core.dependencies import get_admin_auth_service
from ....domain.models import AdminPrincipal
from ...api.dependencies import require_admin
from ...api.schemas.admin import (
    AdminLoginRequest,
    AdminRegisterRequest,
    ForgotPasswordRequest,
    ResetPasswordRequest,
)

router = APIRouter(prefix="/api/admin", tags=["Admin Authentication"])

RESET_REQUESTED_MESSAGE = "If an account exists for that email, a reset link has been sent."


@router.post("/login")
def admin_login(
    payload: AdminLoginRequest,
    admin_auth: AdminAuthService = Depends(get_admin_auth_service),
) -> dict:
    token, admin = admin_auth.authenticate(payload.email, payload.password)
    return {"token": token, "token_type": "bearer", "admin": serialize_admin(admin)}


@router.post("/register", status_code=status.HTTP_201_CREATED)
def admin_register(
    payload: AdminRegisterRequest,
    admin_auth: AdminAuthService = Depends(get_admin_auth_service),
) -> dict:
    try:
        admin = admin_auth.register(
            email=payload.email,
            password=payload.password,
            first_name=payload.first_name,
            last_name=payload.last_name,
            admin_code=payload.admin_code,
        )
    except RegistrationDisabledError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return {"message": "Admin account created successfully", "admin": serialize_admin(admin)}


@router.get("/profile")
def admin_profile(current_admin: AdminPrincipal = Depends(require_admin)) -> dict:
    return serialize_admin(current_admin)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def admin_logout(_: AdminPrincipal = Depends(require_admin)) -> Response:
    # Tokens are stateless; the client discards its copy.
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/forgot-password")
def admin_forgot_password(
    payload: ForgotPasswordRequest,
    admin_auth: AdminAuthService = Depends(get_admin_auth_service),
) -> dict:
    admin_auth.request_password_reset(payload.email)
    return {"message": RESET_REQUESTED_MESSAGE}


@router.post("/reset-password")
def admin_reset_password(
    payload: ResetPasswordRequest,
    admin_auth: AdminAuthService = Depends(get_admin_auth_service),
) -> dict:
    try:
        admin_auth.confirm_password_reset(payload.token, payload.new_password)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return {"message": "Password has been reset"}


def serialize_admin(admin: AdminPrincipal) -> dict:
    return {
        "id": admin.id,
        "email": admin.email,
        "firstName": admin.first_name,
        "lastName": admin.last_name,
        "role": admin.role,
    }
