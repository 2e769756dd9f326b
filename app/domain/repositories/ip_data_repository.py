"""
IP Data Repository Interface.
Defines the query layer that joins IP records to their owning users.
"""

from typing import Any, Dict, List, Optional, Tuple

from app.domain.enums import RecordType, Shift
from app.domain.models.ip_data import IpData
from app.domain.models.user import User
from app.domain.repositories.base import BaseRepository

EnrichedRow = Tuple[IpData, Optional[User]]


class IpDataRepository(BaseRepository[IpData]):
    """Interface for IpData-specific operations."""

    def get_by_ip(self, ip: str) -> Optional[IpData]:
        """Find the record holding an IP address."""
        ...

    def get_latest_by_pid(self, pid: str) -> Optional[IpData]:
        """Most recent record submitted for a PID."""
        ...

    def list_enriched(
        self,
        page: int = 1,
        limit: int = 10,
        record_type: Optional[RecordType] = None,
        shift: Optional[Shift] = None,
    ) -> Dict[str, Any]:
        """Page of (record, owner) rows plus the unpaginated total.

        Without a shift filter every record is returned, owner or not.
        With a shift filter only records whose owner works that shift are.
        """
        ...

    def list_enriched_all(self, record_type: Optional[RecordType] = None) -> List[EnrichedRow]:
        """Every (record, owner) row, newest first."""
        ...

    def top_values(self, column_name: str, limit: int = 10) -> List[Tuple[Optional[str], int]]:
        """Most frequent values of a column with their counts."""
        ...

    def delete_all(self) -> int:
        """Delete every record; return how many were removed."""
        ...
