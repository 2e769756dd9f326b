"""
SQLAlchemy Implementation of IP Data Repository.

Records are joined to their owner on users.pid = ip_data.pid. The
unfiltered listing is a LEFT OUTER JOIN so records whose PID no longer
matches a user still show up; the shift listing is an INNER JOIN since
an orphaned record has no shift to match.
"""

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Query

from app.domain.enums import RecordType, Shift
from app.domain.models.ip_data import IpData
from app.domain.models.user import User
from app.domain.repositories.ip_data_repository import EnrichedRow, IpDataRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository

GROUPABLE_COLUMNS = {"country_name", "city"}


class SQLAlchemyIpDataRepository(SQLAlchemyRepository[IpData], IpDataRepository):
    """IpData repository implementation using SQLAlchemy."""

    def get_by_ip(self, ip: str) -> Optional[IpData]:
        return self.db.query(IpData).filter(IpData.ip == ip).first()

    def get_latest_by_pid(self, pid: str) -> Optional[IpData]:
        return (
            self.db.query(IpData)
            .filter(IpData.pid == pid)
            .order_by(IpData.created_at.desc(), IpData.id.desc())
            .first()
        )

    def _enriched_query(
        self,
        record_type: Optional[RecordType] = None,
        shift: Optional[Shift] = None,
    ) -> Query:
        query = self.db.query(IpData, User).select_from(IpData)

        if shift is None:
            query = query.outerjoin(User, User.pid == IpData.pid)
        else:
            query = query.join(User, User.pid == IpData.pid).filter(User.shift == int(shift))

        if record_type is not None:
            query = query.filter(IpData.record_type == record_type.value)

        return query

    def list_enriched(
        self,
        page: int = 1,
        limit: int = 10,
        record_type: Optional[RecordType] = None,
        shift: Optional[Shift] = None,
    ) -> Dict[str, Any]:
        query = self._enriched_query(record_type, shift)

        total = query.with_entities(func.count(IpData.id)).scalar() or 0
        offset = (page - 1) * limit
        rows = (
            query.order_by(IpData.created_at.desc(), IpData.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )

        return {"items": [(r[0], r[1]) for r in rows], "total": total}

    def list_enriched_all(self, record_type: Optional[RecordType] = None) -> List[EnrichedRow]:
        rows = (
            self._enriched_query(record_type)
            .order_by(IpData.created_at.desc(), IpData.id.desc())
            .all()
        )
        return [(r[0], r[1]) for r in rows]

    def top_values(self, column_name: str, limit: int = 10) -> List[Tuple[Optional[str], int]]:
        if column_name not in GROUPABLE_COLUMNS:
            raise ValueError(f"Cannot group IP data by {column_name!r}")

        column = getattr(IpData, column_name)
        count = func.count(IpData.id)
        results = (
            self.db.query(column.label("value"), count.label("count"))
            .group_by(column)
            .order_by(count.desc())
            .limit(limit)
            .all()
        )
        return [(r.value, r.count) for r in results]

    def delete_all(self) -> int:
        deleted = self.db.query(IpData).delete(synchronize_session=False)
        self._commit()
        return deleted
