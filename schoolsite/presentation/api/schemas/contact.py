from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ContactRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: EmailStr
    phone: Optional[str] = None
    subject: str
    message: str = Field(max_length=5000)


class ContactStatusUpdate(BaseModel):
    status: str
