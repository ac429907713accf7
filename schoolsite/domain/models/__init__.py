"""Domain models for the school site backend."""

from .administrator import AdminPrincipal, Administrator, SessionClaims
from .admission import ADMISSION_STATUSES, AdmissionApplication
from .contact_message import CONTACT_STATUSES, ContactMessage
from .news import NewsItem

__all__ = [
    "ADMISSION_STATUSES",
    "AdminPrincipal",
    "Administrator",
    "AdmissionApplication",
    "CONTACT_STATUSES",
    "ContactMessage",
    "NewsItem",
    "SessionClaims",
]
