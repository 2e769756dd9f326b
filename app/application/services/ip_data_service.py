"""IP data service — write checks, enriched listings and statistics."""

from typing import Any, Dict, List, Optional

import structlog

from app.core.exceptions import (
    ConflictException,
    EntityNotFoundException,
    ForbiddenException,
    ValidationException,
)
from app.domain.enums import ALL_RECORD_TYPES, RecordType, Shift
from app.domain.repositories.ip_data_repository import EnrichedRow, IpDataRepository
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.common import Pagination
from app.domain.schemas.ip_data import (
    IpDataCreate,
    IpDataRead,
    IpDataStats,
    IpDataStored,
    IpDataWithUser,
    OwnerSummary,
    ValueCount,
)

logger = structlog.get_logger(__name__)

TOP_N = 10


def parse_record_type(value: Optional[str]) -> Optional[RecordType]:
    """Query-string record type; empty or "All" means no filter."""
    if value is None or value == "" or value == ALL_RECORD_TYPES:
        return None
    try:
        return RecordType(value)
    except ValueError:
        raise ValidationException("Invalid record type. Must be one of: Search, Session, Click")


def parse_shift(value: int) -> Shift:
    try:
        return Shift(value)
    except ValueError:
        raise ValidationException("Invalid shift ID. Must be 1 (Morning), 2 (Evening), or 3 (Night)")


def store_ip_data(
    repo: IpDataRepository,
    users: UserRepository,
    body: IpDataCreate,
) -> IpDataStored:
    if users.get_by_pid(body.pid) is None:
        raise ForbiddenException(
            "Invalid PID. This PID is not registered in our system",
            {
                "pid": body.pid,
                "suggestion": "Please contact administrator to register your PID",
            },
        )

    geo = body.ip_data
    existing = repo.get_by_ip(geo.ip)
    if existing:
        raise ConflictException(
            "This IP address has already been saved",
            {
                "existing_pid": existing.pid,
                "ip": existing.ip,
                "location": f"{existing.city}, {existing.country_name}",
            },
        )

    record = repo.create({
        **geo.model_dump(),
        "pid": body.pid,
        "record_type": body.record_type.value,
    })
    logger.info("IP data stored", pid=record.pid, ip=record.ip, record_type=record.record_type)

    return IpDataStored(
        id=record.id,
        pid=record.pid,
        record_type=body.record_type,
        ip=record.ip,
        city=record.city,
        country=record.country_name,
    )


def get_ip_data_by_pid(repo: IpDataRepository, pid: str) -> IpDataRead:
    record = repo.get_latest_by_pid(pid)
    if not record:
        raise EntityNotFoundException("IP data not found for this PID")
    return IpDataRead.model_validate(record)


def _enrich(rows: List[EnrichedRow]) -> List[IpDataWithUser]:
    return [
        IpDataWithUser(
            **IpDataRead.model_validate(record).model_dump(),
            user=OwnerSummary.from_user(user),
        )
        for record, user in rows
    ]


def list_ip_data(
    repo: IpDataRepository,
    page: int = 1,
    limit: int = 10,
    record_type: Optional[RecordType] = None,
    shift: Optional[Shift] = None,
) -> Dict[str, Any]:
    result = repo.list_enriched(page=page, limit=limit, record_type=record_type, shift=shift)
    return {
        "items": _enrich(result["items"]),
        "pagination": Pagination.build(page, limit, result["total"]),
    }


def export_ip_data(repo: IpDataRepository, record_type: Optional[RecordType] = None) -> List[IpDataWithUser]:
    return _enrich(repo.list_enriched_all(record_type))


def get_ip_data_stats(repo: IpDataRepository) -> IpDataStats:
    return IpDataStats(
        total_records=repo.count(),
        top_countries=[ValueCount(value=v, count=c) for v, c in repo.top_values("country_name", TOP_N)],
        top_cities=[ValueCount(value=v, count=c) for v, c in repo.top_values("city", TOP_N)],
    )


def delete_ip_data_by_pid(repo: IpDataRepository, pid: str) -> None:
    record = repo.get_latest_by_pid(pid)
    if not record:
        raise EntityNotFoundException("IP data not found for this PID")
    ip = record.ip
    repo.delete(record.id)
    logger.info("IP data deleted", pid=pid, ip=ip)


def delete_all_ip_data(repo: IpDataRepository) -> int:
    deleted = repo.delete_all()
    logger.warning("All IP data deleted", deleted_count=deleted)
    return deleted
