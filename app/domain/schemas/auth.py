"""Pydantic schemas for Admin and Auth."""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from app.domain.schemas.common import normalize_email

MIN_PASSWORD_LENGTH = 6


class AdminCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return normalize_email(v)


class AdminRead(BaseModel):
    id: int
    name: str
    email: str
    role: str
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_login: Optional[datetime] = None

    model_config = {"from_attributes": True}


class AdminSummary(BaseModel):
    id: int
    name: str
    email: str
    role: str
    last_login: Optional[datetime] = None

    model_config = {"from_attributes": True}


class AdminIdentity(BaseModel):
    """Minimal identity attached to an authenticated request."""
    id: int
    email: str
    name: str
    role: str

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.strip().lower()


class LoginData(BaseModel):
    token: str
    token_type: str = "bearer"
    admin: AdminSummary


class ChangePasswordRequest(BaseModel):
    email: str
    new_password: str = Field(
        min_length=MIN_PASSWORD_LENGTH,
        validation_alias=AliasChoices("new_password", "newPassword"),
    )

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return normalize_email(v)
