"""Pydantic schemas for the geolocation lookup proxy."""

import ipaddress
from typing import Optional

from pydantic import BaseModel, field_validator


class GeoLookupRequest(BaseModel):
    ip: Optional[str] = None

    @field_validator("ip")
    @classmethod
    def check_ip(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        v = v.strip()
        ipaddress.ip_address(v)
        return v


class GeoLookupResult(BaseModel):
    ip: str
    city: Optional[str] = None
    region: Optional[str] = None
    country_name: Optional[str] = None
    country_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    org: Optional[str] = None
    asn: Optional[str] = None
    postal: Optional[str] = None
    version: str
    continent_code: Optional[str] = None
    # Not provided by ipinfo Lite
    currency: Optional[str] = None
    country_tld: Optional[str] = None
    languages: Optional[str] = None
    country_calling_code: Optional[str] = None
    in_eu: Optional[bool] = None
    utc_offset: Optional[str] = None
