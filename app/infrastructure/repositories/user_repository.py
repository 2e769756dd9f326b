"""
SQLAlchemy Implementation of User Repository.
"""

from typing import List, Optional, Tuple

from sqlalchemy import func

from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_pid(self, pid: str) -> Optional[User]:
        return self.db.query(User).filter(User.pid == pid).first()

    def list_recent(self, skip: int, limit: int) -> List[User]:
        return (
            self.db.query(User)
            .order_by(User.created_at.desc(), User.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def count_by_shift(self) -> List[Tuple[Optional[int], int]]:
        results = (
            self.db.query(User.shift, func.count(User.id).label("count"))
            .group_by(User.shift)
            .order_by(User.shift.asc())
            .all()
        )
        return [(r.shift, r.count) for r in results]
