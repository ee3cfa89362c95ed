from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator
from app.schemas.common import CamelModel


class WorkerBase(CamelModel):
    name: str = Field(min_length=1)
    dob: Optional[str] = None
    gender: Optional[str] = None
    contact: Optional[str] = None
    home_state: Optional[str] = None
    id_type: Optional[str] = None
    id_number: Optional[str] = None
    registered_on: Optional[str] = None
    hospital_name: Optional[str] = None


class WorkerCreate(WorkerBase):
    pass


class WorkerUpdate(CamelModel):
    """Partial update. workerId and hospitalId are not writable."""

    name: Optional[str] = Field(default=None, min_length=1)
    dob: Optional[str] = None
    gender: Optional[str] = None
    contact: Optional[str] = None
    home_state: Optional[str] = None
    id_type: Optional[str] = None
    id_number: Optional[str] = None
    registered_on: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_null(cls, v):
        if v is None:
            raise ValueError("name cannot be empty")
        return v


class WorkerResponse(WorkerBase):
    id: str
    worker_id: str
    hospital_id: str
    created_at: Optional[datetime] = None

    @field_validator("id", "hospital_id", mode="before")
    @classmethod
    def _stringify_ids(cls, v):
        return str(v)
