"""
User Repository Interface.
"""

from typing import List, Optional, Tuple

from app.domain.repositories.base import BaseRepository
from app.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        ...

    def get_by_pid(self, pid: str) -> Optional[User]:
        """Find a user by personal ID."""
        ...

    def list_recent(self, skip: int, limit: int) -> List[User]:
        """Users ordered by creation time, newest first."""
        ...

    def count_by_shift(self) -> List[Tuple[Optional[int], int]]:
        """(shift, count) pairs ordered by shift ascending."""
        ...
