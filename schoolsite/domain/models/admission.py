from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

ADMISSION_STATUSES = ("pending", "reviewing", "accepted", "rejected")


@dataclass(slots=True)
class AdmissionApplication:
    """An applicant's form as submitted from the public admission page."""

    id: int
    first_name: str
    last_name: str
    date_of_birth: Optional[date]
    gender: Optional[str]
    nationality: Optional[str]
    address: Optional[str]
    grade_level: Optional[str]
    preferred_start_date: Optional[date]
    previous_school: Optional[str]
    previous_school_address: Optional[str]
    last_grade_completed: Optional[str]
    father_name: Optional[str]
    mother_name: Optional[str]
    father_occupation: Optional[str]
    mother_occupation: Optional[str]
    guardian_phone: Optional[str]
    guardian_email: Optional[str]
    medical_conditions: Optional[str]
    special_needs: Optional[str]
    heard_about_us: Optional[str]
    status: str
    created_at: datetime
    updated_at: datetime
