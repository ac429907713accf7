from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class _ApplicantFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date_of_birth: Optional[date] = Field(default=None, alias="dateOfBirth")
    gender: Optional[str] = None
    nationality: Optional[str] = None
    address: Optional[str] = None
    grade_level: Optional[str] = Field(default=None, alias="gradeLevel")
    preferred_start_date: Optional[date] = Field(default=None, alias="preferredStartDate")
    previous_school: Optional[str] = Field(default=None, alias="previousSchool")
    previous_school_address: Optional[str] = Field(default=None, alias="previousSchoolAddress")
    last_grade_completed: Optional[str] = Field(default=None, alias="lastGradeCompleted")
    father_name: Optional[str] = Field(default=None, alias="fatherName")
    mother_name: Optional[str] = Field(default=None, alias="motherName")
    father_occupation: Optional[str] = Field(default=None, alias="fatherOccupation")
    mother_occupation: Optional[str] = Field(default=None, alias="motherOccupation")
    guardian_phone: Optional[str] = Field(default=None, alias="guardianPhone")
    guardian_email: Optional[EmailStr] = Field(default=None, alias="guardianEmail")
    medical_conditions: Optional[str] = Field(default=None, alias="medicalConditions")
    special_needs: Optional[str] = Field(default=None, alias="specialNeeds")
    heard_about_us: Optional[str] = Field(default=None, alias="heardAboutUs")


class AdmissionRequest(_ApplicantFields):
    first_name: str = Field(alias="firstName", max_length=100)
    last_name: str = Field(alias="lastName", max_length=100)


class AdmissionUpdateRequest(_ApplicantFields):
    first_name: Optional[str] = Field(default=None, alias="firstName", max_length=100)
    last_name: Optional[str] = Field(default=None, alias="lastName", max_length=100)
    status: Optional[str] = None
