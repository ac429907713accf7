from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class Administrator:
    """Stored admin account. Only the persistence layer and the auth service see the hash."""

    id: str
    email: str
    password_hash: str
    first_name: str
    last_name: str
    role: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class AdminPrincipal:
    """Identity resolved by the auth gate and handed to protected handlers."""

    id: str
    email: str
    role: str
    first_name: str = ""
    last_name: str = ""

    @classmethod
    def from_administrator(cls, admin: Administrator) -> "AdminPrincipal":
        return cls(
            id=admin.id,
            email=admin.email,
            role=admin.role,
            first_name=admin.first_name,
            last_name=admin.last_name,
        )


@dataclass(slots=True, frozen=True)
class SessionClaims:
    subject_id: str
    email: str
    role: str
    expires_at: Optional[datetime] = None
