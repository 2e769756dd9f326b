"""Pydantic schemas for IP geolocation records."""

from datetime import datetime
from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, Field, field_validator

from app.domain.enums import RecordType, describe_shift
from app.domain.models.user import User


class GeoAttributes(BaseModel):
    ip: str = Field(min_length=1)
    network: Optional[str] = None
    version: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    region_code: Optional[str] = None
    country: Optional[str] = None
    country_name: Optional[str] = None
    country_code: Optional[str] = None
    country_code_iso3: Optional[str] = None
    country_capital: Optional[str] = None
    country_tld: Optional[str] = None
    continent_code: Optional[str] = None
    in_eu: Optional[bool] = None
    postal: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    utc_offset: Optional[str] = None
    country_calling_code: Optional[str] = None
    currency: Optional[str] = None
    currency_name: Optional[str] = None
    languages: Optional[str] = None
    country_area: Optional[float] = None
    country_population: Optional[int] = None
    asn: Optional[str] = None
    org: Optional[str] = None

    @field_validator("ip")
    @classmethod
    def strip_ip(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("IP data is required")
        return v

    @field_validator("postal", "asn", mode="before")
    @classmethod
    def stringify(cls, v):
        # ipapi-style payloads send these as numbers
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class IpDataCreate(BaseModel):
    pid: Union[str, int]
    record_type: RecordType
    ip_data: GeoAttributes = Field(validation_alias=AliasChoices("ip_data", "ipData"))

    @field_validator("pid")
    @classmethod
    def check_pid(cls, v: Union[str, int]) -> str:
        v = str(v).strip()
        if not v:
            raise ValueError("PID is required")
        return v


class IpDataStored(BaseModel):
    id: int
    pid: str
    record_type: RecordType
    ip: str
    city: Optional[str] = None
    country: Optional[str] = None


class IpDataRead(GeoAttributes):
    id: int
    pid: str
    record_type: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class OwnerSummary(BaseModel):
    """The owning user as seen from an IP record; empty when no user matches."""
    name: Optional[str] = None
    email: Optional[str] = None
    shift: Optional[int] = None
    shift_label: str
    shift_time: str

    @classmethod
    def from_user(cls, user: Optional[User]) -> "OwnerSummary":
        shift = user.shift if user is not None else None
        label, time_range = describe_shift(shift)
        return cls(
            name=user.name if user is not None else None,
            email=user.email if user is not None else None,
            shift=shift,
            shift_label=label,
            shift_time=time_range,
        )


class IpDataWithUser(IpDataRead):
    user: OwnerSummary


class ValueCount(BaseModel):
    value: Optional[str] = None
    count: int


class IpDataStats(BaseModel):
    total_records: int
    top_countries: list[ValueCount]
    top_cities: list[ValueCount]


class DeletedCount(BaseModel):
    deleted_count: int
