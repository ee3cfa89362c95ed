from datetime import datetime
from typing import Annotated, Literal, Optional, Union
from pydantic import EmailStr, Field, RootModel, field_validator
from app.schemas.common import CamelModel

Password = Annotated[str, Field(min_length=1, max_length=128)]


# --- Signup: one variant per role, discriminated by "role" ---

class WorkerSignup(CamelModel):
    role: Literal["worker"]
    name: str = Field(min_length=1)
    mobile_number: str = Field(min_length=1)
    aadhaar_number: Optional[str] = None
    password: Password


class HospitalSignup(CamelModel):
    role: Literal["hospital"]
    hospital_name: str = Field(min_length=1)
    registration_number: str = Field(min_length=1)
    administrator_email: EmailStr
    admin_contact: Optional[str] = None
    password: Password


class GovSignup(CamelModel):
    role: Literal["gov"]
    name: Optional[str] = None
    official_email: EmailStr
    employee_id: str = Field(min_length=1)
    verification_code: Optional[str] = None
    password: Password


SignupVariant = Union[WorkerSignup, HospitalSignup, GovSignup]


class SignupRequest(RootModel[Annotated[SignupVariant, Field(discriminator="role")]]):
    pass


# --- Login: each role logs in with its own key ---

class WorkerLogin(CamelModel):
    role: Literal["worker"]
    mobile_number: str
    password: str


class HospitalLogin(CamelModel):
    role: Literal["hospital"]
    registration_number: str
    password: str


class GovLogin(CamelModel):
    role: Literal["gov"]
    employee_id: str
    password: str


LoginVariant = Union[WorkerLogin, HospitalLogin, GovLogin]


class LoginRequest(RootModel[Annotated[LoginVariant, Field(discriminator="role")]]):
    pass


# --- Responses ---

class AuthUser(CamelModel):
    display_name: str
    role: str


class SignupResponse(CamelModel):
    message: str
    token: str
    token_type: str = "bearer"
    user: AuthUser


class LoginResponse(CamelModel):
    message: str
    token: str
    token_type: str = "bearer"
    role: str


class AccountResponse(CamelModel):
    id: str
    display_name: str
    email: Optional[str] = None
    mobile: Optional[str] = None
    role: str
    role_details: dict = {}
    created_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, v):
        return str(v)
