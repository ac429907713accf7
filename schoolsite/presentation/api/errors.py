import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from ...domain.errors import AdminAuthError

logger = logging.getLogger(__name__)

MAINTENANCE_MESSAGE = "Site is under maintenance"


class MaintenanceModeError(Exception):
    pass


def register_exception_handlers(app: FastAPI) -> None:
    """Render every handled error as a ``{"message": ...}`` body."""

    @app.exception_handler(AdminAuthError)
    async def _admin_auth_error(request: Request, exc: AdminAuthError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("Admin authentication failed on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(HTTPException)
    async def _http_error(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(MaintenanceModeError)
    async def _maintenance(request: Request, exc: MaintenanceModeError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"message": MAINTENANCE_MESSAGE, "maintenanceMode": True},
        )
