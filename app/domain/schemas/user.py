"""Pydantic schemas for the User domain."""

from datetime import datetime
from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, Field, field_validator

from app.domain.enums import Shift
from app.domain.schemas.common import normalize_email

MIN_PHONE_LENGTH = 10


class UserBase(BaseModel):
    name: str = Field(min_length=1)
    email: str
    phone: str
    shift: Shift

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        return normalize_email(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str) -> str:
        v = v.strip()
        if len(v) < MIN_PHONE_LENGTH:
            raise ValueError(f"Phone number must be at least {MIN_PHONE_LENGTH} characters")
        return v

    @field_validator("shift", mode="before")
    @classmethod
    def coerce_shift(cls, v):
        # Forms send "1"; Shift(int) handles the rest
        if isinstance(v, str) and v.strip().isdigit():
            return int(v)
        return v


class UserCreate(UserBase):
    pid: Union[str, int] = Field(validation_alias=AliasChoices("pid", "PID"))

    @field_validator("pid")
    @classmethod
    def check_pid(cls, v: Union[str, int]) -> str:
        v = str(v).strip()
        if not v.isdigit():
            raise ValueError("PID must contain only numbers")
        return v


class UserUpdate(UserBase):
    """PID is immutable; any pid in the body is ignored."""


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    shift: int
    pid: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class UserDeleted(BaseModel):
    id: int
    name: str
    email: str


class ShiftCount(BaseModel):
    shift: Optional[int] = None
    label: str
    count: int


class UserStats(BaseModel):
    total_users: int
    shift_stats: list[ShiftCount]
