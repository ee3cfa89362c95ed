from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator
from app.schemas.common import CamelModel


class StaffBase(CamelModel):
    name: str = Field(min_length=1)
    role: str = Field(min_length=1)
    department: Optional[str] = None
    qualification: Optional[str] = None
    contact: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    date_of_joining: Optional[str] = None
    shift_timing: Optional[str] = None
    experience: Optional[str] = None
    salary: Optional[str] = None
    emergency_contact: Optional[str] = None


class StaffCreate(StaffBase):
    pass


class StaffUpdate(CamelModel):
    """Partial update. staffId is assigned once and kept even if the role changes."""

    name: Optional[str] = None
    role: Optional[str] = None
    department: Optional[str] = None
    qualification: Optional[str] = None
    contact: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    date_of_joining: Optional[str] = None
    shift_timing: Optional[str] = None
    experience: Optional[str] = None
    salary: Optional[str] = None
    emergency_contact: Optional[str] = None

    @field_validator("name", "role")
    @classmethod
    def _required_not_null(cls, v):
        if v is None:
            raise ValueError("value cannot be empty")
        return v


class StaffResponse(StaffBase):
    id: str
    staff_id: str
    hospital_id: str
    created_at: Optional[datetime] = None

    @field_validator("id", "hospital_id", mode="before")
    @classmethod
    def _stringify_ids(cls, v):
        return str(v)
