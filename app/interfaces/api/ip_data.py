"""IP data API routes — public submission/lookup, admin listings and cleanup."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.application.services import ip_data_service
from app.domain.repositories.ip_data_repository import IpDataRepository
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import AdminIdentity
from app.domain.schemas.common import MAX_PAGE, MAX_PAGE_SIZE, ApiResponse
from app.domain.schemas.ip_data import (
    DeletedCount,
    IpDataCreate,
    IpDataRead,
    IpDataStats,
    IpDataStored,
    IpDataWithUser,
)
from app.interfaces.api.deps import require_admin
from app.interfaces.deps import get_ip_data_repository, get_user_repository

router = APIRouter(prefix="/api", tags=["IP Data"])


@router.post("/ip-data", response_model=ApiResponse[IpDataStored], status_code=status.HTTP_201_CREATED)
def store_ip_data(
    body: IpDataCreate,
    repo: IpDataRepository = Depends(get_ip_data_repository),
    users: UserRepository = Depends(get_user_repository),
):
    stored = ip_data_service.store_ip_data(repo, users, body)
    return ApiResponse(message="IP data stored successfully", data=stored)


@router.get("/ip-data", response_model=ApiResponse[list[IpDataWithUser]])
def list_ip_data(
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    record_type: Optional[str] = None,
    repo: IpDataRepository = Depends(get_ip_data_repository),
    admin: AdminIdentity = Depends(require_admin),
):
    result = ip_data_service.list_ip_data(
        repo,
        page=page,
        limit=limit,
        record_type=ip_data_service.parse_record_type(record_type),
    )
    return ApiResponse(data=result["items"], pagination=result["pagination"])


@router.get("/ip-data/shift/{shift_id}", response_model=ApiResponse[list[IpDataWithUser]])
def list_ip_data_by_shift(
    shift_id: int,
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    record_type: Optional[str] = None,
    repo: IpDataRepository = Depends(get_ip_data_repository),
    admin: AdminIdentity = Depends(require_admin),
):
    result = ip_data_service.list_ip_data(
        repo,
        page=page,
        limit=limit,
        record_type=ip_data_service.parse_record_type(record_type),
        shift=ip_data_service.parse_shift(shift_id),
    )
    return ApiResponse(data=result["items"], pagination=result["pagination"])


@router.get("/ip-data-export", response_model=ApiResponse[list[IpDataWithUser]])
def export_ip_data(
    record_type: Optional[str] = None,
    repo: IpDataRepository = Depends(get_ip_data_repository),
    admin: AdminIdentity = Depends(require_admin),
):
    data = ip_data_service.export_ip_data(repo, ip_data_service.parse_record_type(record_type))
    return ApiResponse(data=data)


@router.get("/ip-data-stats", response_model=ApiResponse[IpDataStats])
def ip_data_stats(
    repo: IpDataRepository = Depends(get_ip_data_repository),
    admin: AdminIdentity = Depends(require_admin),
):
    return ApiResponse(data=ip_data_service.get_ip_data_stats(repo))


@router.get("/ip-data/{pid}", response_model=ApiResponse[IpDataRead])
def get_ip_data(pid: str, repo: IpDataRepository = Depends(get_ip_data_repository)):
    return ApiResponse(data=ip_data_service.get_ip_data_by_pid(repo, pid))


@router.delete("/ip-data/{pid}", response_model=ApiResponse)
def delete_ip_data(
    pid: str,
    repo: IpDataRepository = Depends(get_ip_data_repository),
    admin: AdminIdentity = Depends(require_admin),
):
    ip_data_service.delete_ip_data_by_pid(repo, pid)
    return ApiResponse(message="IP data deleted successfully")


@router.delete("/ip-data", response_model=ApiResponse[DeletedCount])
def delete_all_ip_data(
    repo: IpDataRepository = Depends(get_ip_data_repository),
    admin: AdminIdentity = Depends(require_admin),
):
    deleted = ip_data_service.delete_all_ip_data(repo)
    return ApiResponse(
        message=f"Successfully deleted {deleted} IP data records",
        data=DeletedCount(deleted_count=deleted),
    )
