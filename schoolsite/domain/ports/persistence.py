from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from ..models import AdmissionApplication, Administrator, ContactMessage, NewsItem


class SettingsRepository(Protocol):
    """Abstract storage for site-wide key-value settings."""

    def get_setting(self, key: str) -> Optional[str]:
        ...

    def set_setting(self, key: str, value: str) -> None:
        ...

    def get_settings(self) -> Dict[str, str]:
        ...


class AdministratorRepository(Protocol):
    """Persistence functions related to admin accounts."""

    def get_admin_by_email(self, email: str) -> Optional[Administrator]:
        ...

    def get_admin_by_id(self, admin_id: str) -> Optional[Administrator]:
        ...

    def create_admin(
        self,
        email: str,
        password_hash: str,
        first_name: str = "",
        last_name: str = "",
        role: str = "admin",
        admin_id: Optional[str] = None,
    ) -> Administrator:
        ...

    def update_admin_password(self, admin_id: str, password_hash: str) -> Administrator:
        ...

    def set_admin_active(self, admin_id: str, is_active: bool) -> Administrator:
        ...


class ContactMessageRepository(Protocol):
    """Storage for messages submitted through the public contact form."""

    def create_contact_message(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone: Optional[str],
        subject: str,
        message: str,
    ) -> ContactMessage:
        ...

    def get_contact_message(self, message_id: int) -> Optional[ContactMessage]:
        ...

    def get_contact_messages(self) -> List[ContactMessage]:
        ...

    def update_contact_message_status(self, message_id: int, status: str) -> ContactMessage:
        ...

    def delete_contact_message(self, message_id: int) -> None:
        ...


class NewsRepository(Protocol):
    """Storage for news posts shown on the public site."""

    def create_news(self, fields: Dict[str, Any]) -> NewsItem:
        ...

    def get_news_item(self, news_id: int) -> Optional[NewsItem]:
        ...

    def get_news(self, *, published_only: bool = False, category: Optional[str] = None) -> List[NewsItem]:
        ...

    def update_news(self, news_id: int, fields: Dict[str, Any]) -> NewsItem:
        ...

    def delete_news(self, news_id: int) -> None:
        ...


class AdmissionRepository(Protocol):
    """Storage for admission applications."""

    def create_admission(self, fields: Dict[str, Any]) -> AdmissionApplication:
        ...

    def get_admission(self, application_id: int) -> Optional[AdmissionApplication]:
        ...

    def get_admissions(self, status: Optional[str] = None) -> List[AdmissionApplication]:
        ...

    def update_admission(self, application_id: int, fields: Dict[str, Any]) -> AdmissionApplication:
        ...

    def delete_admission(self, application_id: int) -> None:
        ...


class PersistenceGateway(
    SettingsRepository,
    AdministratorRepository,
    ContactMessageRepository,
    NewsRepository,
    AdmissionRepository,
    Protocol,
):
    """Composite gateway combining every persistence concern used by the app."""

    def close(self) -> None:
        ...
