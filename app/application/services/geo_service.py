"""Geo service — ipinfo.io Lite lookups reshaped into the IP record layout."""

import ipaddress
from typing import Any, Dict

import structlog

from app.core.exceptions import ValidationException
from app.domain.schemas.geo import GeoLookupRequest, GeoLookupResult
from app.infrastructure.ipinfo_api import IpInfoClient

logger = structlog.get_logger(__name__)


def to_geo_result(ip: str, raw: Dict[str, Any]) -> GeoLookupResult:
    """Map an ipinfo Lite payload onto the fields clients submit with /ip-data."""
    address = raw.get("ip") or ip
    return GeoLookupResult(
        ip=address,
        city=raw.get("city") or None,
        region=raw.get("region") or None,
        country_name=raw.get("country") or None,
        country_code=raw.get("country_code") or None,
        latitude=raw.get("latitude") or None,
        longitude=raw.get("longitude") or None,
        timezone=raw.get("timezone") or None,
        org=raw.get("as_name") or None,
        asn=raw.get("asn") or None,
        postal=raw.get("postal") or None,
        version=f"IPv{ipaddress.ip_address(ip).version}",
        continent_code=raw.get("continent_code") or None,
    )


async def lookup(client: IpInfoClient, body: GeoLookupRequest) -> GeoLookupResult:
    if not body.ip:
        raise ValidationException("IP address is required", code="missing_ip")

    logger.info("Fetching geo data", ip=body.ip)
    raw = await client.lookup(body.ip)
    result = to_geo_result(body.ip, raw)
    logger.info("Geo data fetched", ip=body.ip, country=result.country_name)
    return result
