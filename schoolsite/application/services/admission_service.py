import logging
from typing import Any, Dict, List, Optional

from ...domain.models import ADMISSION_STATUSES, AdmissionApplication
from ...domain.ports.persistence import AdmissionRepository

logger = logging.getLogger(__name__)


class AdmissionNotFound(LookupError):
    pass


class AdmissionService:
    """Takes admission forms from the public site and tracks their review."""

    def __init__(self, repository: AdmissionRepository) -> None:
        self._repository = repository

    def submit(self, fields: Dict[str, Any]) -> AdmissionApplication:
        cleaned = _clean(fields)
        # New applications always enter the queue as pending.
        cleaned.pop("status", None)
        missing = [name for name in ("first_name", "last_name") if not cleaned.get(name)]
        if missing:
            raise ValueError(f"Missing required fields: {', '.join(name.replace('_', ' ') for name in missing)}")
        application = self._repository.create_admission(cleaned)
        logger.info("Admission application %s received", application.id)
        return application

    def list_applications(self, status: Optional[str] = None) -> List[AdmissionApplication]:
        if status is not None:
            self._check_status(status)
        return self._repository.get_admissions(status)

    def update(self, application_id: int, fields: Dict[str, Any]) -> AdmissionApplication:
        self._require(application_id)
        cleaned = _clean(fields)
        if "status" in cleaned:
            self._check_status(cleaned["status"])
        for name in ("first_name", "last_name"):
            if name in cleaned and not cleaned[name]:
                raise ValueError(f"{name.replace('_', ' ').capitalize()} cannot be empty")
        application = self._repository.update_admission(application_id, cleaned)
        logger.info("Admission application %s updated (status=%s)", application.id, application.status)
        return application

    def delete(self, application_id: int) -> None:
        self._require(application_id)
        self._repository.delete_admission(application_id)

    def _require(self, application_id: int) -> AdmissionApplication:
        application = self._repository.get_admission(application_id)
        if application is None:
            raise AdmissionNotFound(f"Admission application {application_id} not found")
        return application

    @staticmethod
    def _check_status(status: str) -> None:
        if status not in ADMISSION_STATUSES:
            raise ValueError(f"Status must be one of: {', '.join(ADMISSION_STATUSES)}")


def _clean(fields: Dict[str, Any]) -> Dict[str, Any]:
    cleaned = {}
    for name, value in fields.items():
        if isinstance(value, str):
            value = value.strip()
            if not value and name not in ("first_name", "last_name"):
                value = None
        cleaned[name] = value
    return cleaned
