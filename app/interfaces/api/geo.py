"""Geo API route — proxy IP lookups to ipinfo.io Lite."""

from fastapi import APIRouter, Depends

from app.application.services import geo_service
from app.domain.schemas.common import ApiResponse
from app.domain.schemas.geo import GeoLookupRequest, GeoLookupResult
from app.infrastructure.ipinfo_api import IpInfoClient
from app.interfaces.deps import get_ipinfo_client

router = APIRouter(prefix="/api", tags=["Geo"])


@router.post("/geo", response_model=ApiResponse[GeoLookupResult])
async def geo_lookup(body: GeoLookupRequest, client: IpInfoClient = Depends(get_ipinfo_client)):
    result = await geo_service.lookup(client, body)
    return ApiResponse(message="Geo data fetched successfully", data=result)
